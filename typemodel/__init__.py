"""
The in-memory type model of a documentation generator:
type expressions that can be copied, printed, and serialized.
"""
from .kinds import TypeKind
from .abstract import Type, wrap, cloned
from .variants import (
	IntrinsicType, UnknownType, LiteralType, TypeParameterType, ReferenceType,
	ArrayType, UnionType, IntersectionType, TupleType, OptionalType, RestType,
	TypeOperatorType,
)
from .signature import SignatureType, SignatureParameterType, MisplacedParameter
from .serialization import Serializer
