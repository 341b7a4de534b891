"""
Turning a type-model tree into plain data.

The serializer does the part every node has in common (the `kind` tag)
and then lets the node fill in the rest. Nodes hand their children back
here rather than calling each other, so there is exactly one place that
knows what a serialized record starts out as.

Getting back from plain data to nodes is somebody else's problem.
"""
from typing import Iterable, Optional
from .abstract import Type
from .diagnostics import Report

class Serializer:
	def __init__(self, report:Optional[Report]=None):
		self._report = report or Report(verbose=0)
	
	def to_object(self, node:Optional[Type]) -> Optional[dict]:
		if node is None: return None
		assert isinstance(node, Type), node
		self._report.info("serializing", node.kind.value)
		return node.serialize(self, self._init(node))
	
	def to_objects(self, nodes:Iterable[Type]) -> list[dict]:
		return [self.to_object(n) for n in nodes]
	
	@staticmethod
	def _init(node:Type) -> dict:
		return {"kind": node.kind.value}
