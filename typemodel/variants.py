"""
The rest of the catalog of type-expression kinds.

Precedence is the whole story here. A node asked to render `wrapped`
is sitting somewhere that binds tighter than its own operators
(say, as the element of an array or one member of a union), so compound
forms put parentheses around themselves. Atoms never need them.
"""
import json
import math
from typing import Optional, Sequence, Union
from .abstract import Type, wrap, cloned
from .kinds import TypeKind

LITERAL_VALUE = Union[str, int, float, bool, None]

class IntrinsicType(Type):
	""" Built-in words like `string`, `number`, `void`. """
	kind = TypeKind.INTRINSIC
	def __init__(self, name:str):
		self.name = name
	def clone(self): return IntrinsicType(self.name)
	def stringify(self, wrapped:bool) -> str: return self.name
	def serialize(self, serializer, init:dict) -> dict: return {**init, "name": self.name}

class UnknownType(Type):
	""" Whatever the parser could not make sense of, kept verbatim. """
	kind = TypeKind.UNKNOWN
	def __init__(self, name:str):
		self.name = name
	def clone(self): return UnknownType(self.name)
	def stringify(self, wrapped:bool) -> str: return self.name
	def serialize(self, serializer, init:dict) -> dict: return {**init, "name": self.name}

class LiteralType(Type):
	kind = TypeKind.LITERAL
	def __init__(self, value:LITERAL_VALUE):
		assert value is None or isinstance(value, (str, int, float, bool)), value
		assert not isinstance(value, float) or math.isfinite(value), value
		self.value = value
	def clone(self): return LiteralType(self.value)
	def stringify(self, wrapped:bool) -> str:
		# Note the bool test must come first: bool is a subclass of int.
		if self.value is None: return "null"
		if isinstance(self.value, bool): return "true" if self.value else "false"
		if isinstance(self.value, str): return json.dumps(self.value, ensure_ascii=False)
		return str(self.value)
	def serialize(self, serializer, init:dict) -> dict: return {**init, "value": self.value}

class TypeParameterType(Type):
	"""
	A generic parameter as declared, e.g. the `T extends object = {}` part of a signature.
	Both the constraint and the default are optional.
	"""
	kind = TypeKind.TYPE_PARAMETER
	def __init__(self, name:str, constraint:Optional[Type]=None, default:Optional[Type]=None):
		self.name = name
		self.constraint = constraint
		self.default = default
	def clone(self):
		return TypeParameterType(self.name, _maybe_clone(self.constraint), _maybe_clone(self.default))
	def stringify(self, wrapped:bool) -> str:
		text = self.name
		if self.constraint is not None: text += " extends " + self.constraint.stringify(False)
		if self.default is not None: text += " = " + self.default.stringify(False)
		return text
	def serialize(self, serializer, init:dict) -> dict:
		result = {**init, "name": self.name}
		if self.constraint is not None: result["constraint"] = serializer.to_object(self.constraint)
		if self.default is not None: result["default"] = serializer.to_object(self.default)
		return result

def _maybe_clone(it:Optional[Type]) -> Optional[Type]:
	return None if it is None else it.clone()

class ReferenceType(Type):
	""" A named type, maybe with type-arguments: `Promise<string>` """
	kind = TypeKind.REFERENCE
	def __init__(self, name:str, type_arguments:Sequence[Type]=()):
		self.name = name
		self.type_arguments = list(type_arguments)
	def clone(self): return ReferenceType(self.name, cloned(self.type_arguments))
	def stringify(self, wrapped:bool) -> str:
		if not self.type_arguments: return self.name
		return "%s<%s>" % (self.name, ", ".join(a.stringify(False) for a in self.type_arguments))
	def serialize(self, serializer, init:dict) -> dict:
		result = {**init, "name": self.name}
		if self.type_arguments: result["typeArguments"] = serializer.to_objects(self.type_arguments)
		return result

class ArrayType(Type):
	kind = TypeKind.ARRAY
	def __init__(self, element_type:Type):
		self.element_type = element_type
	def clone(self): return ArrayType(self.element_type.clone())
	def stringify(self, wrapped:bool) -> str: return self.element_type.stringify(True) + "[]"
	def serialize(self, serializer, init:dict) -> dict:
		return {**init, "elementType": serializer.to_object(self.element_type)}

class _Compound(Type):
	""" Unions and intersections differ only in the glyph. """
	glyph: str
	def __init__(self, types:Sequence[Type]):
		self.types = list(types)
	def clone(self): return type(self)(cloned(self.types))
	def stringify(self, wrapped:bool) -> str:
		return wrap(wrapped, self.glyph.join(t.stringify(True) for t in self.types))
	def serialize(self, serializer, init:dict) -> dict:
		return {**init, "types": serializer.to_objects(self.types)}

class UnionType(_Compound):
	kind = TypeKind.UNION
	glyph = " | "

class IntersectionType(_Compound):
	kind = TypeKind.INTERSECTION
	glyph = " & "

class TupleType(Type):
	kind = TypeKind.TUPLE
	def __init__(self, elements:Sequence[Type]):
		self.elements = list(elements)
	def clone(self): return TupleType(cloned(self.elements))
	def stringify(self, wrapped:bool) -> str:
		return "[%s]" % ", ".join(e.stringify(False) for e in self.elements)
	def serialize(self, serializer, init:dict) -> dict:
		return {**init, "elements": serializer.to_objects(self.elements)}

class OptionalType(Type):
	""" Only meaningful as a tuple element: the `b?` in `[a, b?]` """
	kind = TypeKind.OPTIONAL
	def __init__(self, element_type:Type):
		self.element_type = element_type
	def clone(self): return OptionalType(self.element_type.clone())
	def stringify(self, wrapped:bool) -> str: return self.element_type.stringify(True) + "?"
	def serialize(self, serializer, init:dict) -> dict:
		return {**init, "elementType": serializer.to_object(self.element_type)}

class RestType(Type):
	""" Only meaningful as a tuple element: the `...b[]` in `[a, ...b[]]` """
	kind = TypeKind.REST
	def __init__(self, element_type:Type):
		self.element_type = element_type
	def clone(self): return RestType(self.element_type.clone())
	def stringify(self, wrapped:bool) -> str: return "..." + self.element_type.stringify(True)
	def serialize(self, serializer, init:dict) -> dict:
		return {**init, "elementType": serializer.to_object(self.element_type)}

TYPE_OPERATORS = frozenset(["keyof", "unique", "readonly"])

class TypeOperatorType(Type):
	kind = TypeKind.TYPE_OPERATOR
	def __init__(self, operator:str, target:Type):
		assert operator in TYPE_OPERATORS, operator
		self.operator = operator
		self.target = target
	def clone(self): return TypeOperatorType(self.operator, self.target.clone())
	def stringify(self, wrapped:bool) -> str:
		return wrap(wrapped, "%s %s" % (self.operator, self.target.stringify(True)))
	def serialize(self, serializer, init:dict) -> dict:
		return {**init, "operator": self.operator, "target": serializer.to_object(self.target)}
