"""
The contract every type-expression node lives up to.

A node knows how to copy itself, how to print itself, and how to
turn itself into plain data. Nobody keeps a big switch over all the
variants: each one carries its own implementation of these three things,
so adding a variant means writing one class and one `TypeKind` member.
"""
from typing import Iterable, TypeVar
from .kinds import TypeKind

T = TypeVar("T", bound="Type")

class Type:
	kind: TypeKind  # Fixed per class. Instances may not reassign it.
	
	def __setattr__(self, key, value):
		if key == "kind": raise AttributeError("The kind of a %s is read-only." % type(self).__name__)
		super().__setattr__(key, value)
	
	def clone(self) -> "Type":
		""" Return a deep and fully independent copy of this node. """
		raise NotImplementedError(type(self))
	
	def stringify(self, wrapped:bool) -> str:
		"""
		Render this node in conventional type syntax.
		
		`wrapped` means the surrounding context would be ambiguous if this
		node's text had loose operators in it. Whether that calls for
		parentheses depends on the node, so the node decides.
		"""
		raise NotImplementedError(type(self))
	
	def serialize(self, serializer, init:dict) -> dict:
		"""
		Return `init` extended with this node's own fields.
		Child nodes go through the serializer, never straight to their own `serialize`.
		"""
		raise NotImplementedError(type(self))
	
	def __str__(self): return self.stringify(False)
	def __repr__(self): return "<%s %s>" % (self.kind.value, self)

def wrap(needs_parens:bool, text:str) -> str:
	return "(%s)" % text if needs_parens else text

def cloned(types:Iterable[T]) -> list[T]:
	return [t.clone() for t in types]
