"""
A walk over a finished type tree to make sure it is put together sensibly.

Two things can go wrong that construction alone does not prevent:

1. A signature parameter can be hung somewhere other than a signature's
   parameter list. It has no meaningful rendering there.
2. One node object can be attached in two places at once. Then mutating
   "one" of them quietly changes the other, and cloning the tree splits
   what used to be a single node into two.

Problems go to the report as issues. Nothing here raises on its own,
though the report will once it has seen enough.
"""
from boozetools.support.foundation import Visitor
from .abstract import Type
from .diagnostics import Report
from .signature import SignatureType, SignatureParameterType
from . import variants

class StructureCheck(Visitor):
	def __init__(self, report:Report):
		self._report = report
		self._seen = set()
		self._path = []
	
	def check(self, root:Type) -> bool:
		self._seen.clear()
		self._path.clear()
		self.visit(root, False)
		return self._report.ok()
	
	def _enter(self, node:Type, step:str, in_parameter_list=False):
		self._path.append(step)
		try:
			if in_parameter_list and not isinstance(node, SignatureParameterType):
				self._report.not_a_parameter(self._path, node)
				in_parameter_list = False
			if id(node) in self._seen: self._report.shared_node(self._path, node)
			else: self.visit(node, in_parameter_list)
		finally:
			self._path.pop()
	
	def _tour(self, nodes, step:str):
		for i, n in enumerate(nodes):
			self._enter(n, "%s[%d]"%(step, i))
	
	def _note(self, node:Type):
		self._seen.add(id(node))
	
	def visit_SignatureType(self, s:SignatureType, _):
		self._note(s)
		self._tour(s.type_parameters, "typeParameters")
		for i, p in enumerate(s.parameters):
			self._enter(p, "parameters[%d]"%i, in_parameter_list=True)
		self._enter(s.return_type, "returnType")
	
	def visit_SignatureParameterType(self, p:SignatureParameterType, in_parameter_list:bool):
		self._note(p)
		if not in_parameter_list: self._report.misplaced_parameter(self._path, p)
		self._enter(p.parameter_type, "parameterType")
	
	def _leaf(self, node:Type, _):
		self._note(node)
	
	visit_IntrinsicType = _leaf
	visit_UnknownType = _leaf
	visit_LiteralType = _leaf
	
	def visit_TypeParameterType(self, tp:variants.TypeParameterType, _):
		self._note(tp)
		if tp.constraint is not None: self._enter(tp.constraint, "constraint")
		if tp.default is not None: self._enter(tp.default, "default")
	
	def visit_ReferenceType(self, r:variants.ReferenceType, _):
		self._note(r)
		self._tour(r.type_arguments, "typeArguments")
	
	def _element(self, node, _):
		self._note(node)
		self._enter(node.element_type, "elementType")
	
	visit_ArrayType = _element
	visit_OptionalType = _element
	visit_RestType = _element
	
	def _compound(self, node, _):
		self._note(node)
		self._tour(node.types, "types")
	
	visit_UnionType = _compound
	visit_IntersectionType = _compound
	
	def visit_TupleType(self, t:variants.TupleType, _):
		self._note(t)
		self._tour(t.elements, "elements")
	
	def visit_TypeOperatorType(self, op:variants.TypeOperatorType, _):
		self._note(op)
		self._enter(op.target, "target")

def check_structure(root:Type, report:Report) -> bool:
	return StructureCheck(report).check(root)
