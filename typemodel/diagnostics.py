"""
Where the type model tells its troubles.

No logging framework: chatter goes to stderr when somebody asked for it,
and structural problems pile up as issues for the host tool to show.
"""
import sys
from typing import Any

class TooManyIssues(Exception):
	pass

class Report:
	_issues : list["Issue"]
	
	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
	
	@property
	def issues(self) -> list["Issue"]: return list(self._issues)
	
	def ok(self): return not self._issues
	
	def issue(self, it:"Issue"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
		for i in self._issues:
			print("  -"*20, file=sys.stderr)
			print(i.as_text(), file=sys.stderr)
		sys.stderr.flush()
	
	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(message)
	
	# Methods the structure check calls:
	def misplaced_parameter(self, path:list[str], node:Any):
		intro = "A signature parameter turned up outside of any parameter list."
		self.issue(Issue(intro, path, node))
	
	def not_a_parameter(self, path:list[str], node:Any):
		intro = "Only signature parameters belong in a parameter list."
		self.issue(Issue(intro, path, node))
	
	def shared_node(self, path:list[str], node:Any):
		intro = "This node is reachable twice. Each node should have exactly one owner."
		self.issue(Issue(intro, path, node))

class Issue:
	def __init__(self, description:str, path:list[str], node:Any):
		self.description = description
		self.path = tuple(path)
		self.node = node
	def where(self) -> str:
		return "/".join(self.path) or "(root)"
	def as_text(self):
		return "\n".join([self.description, "    at " + self.where(), "    node: %r" % (self.node,)])
