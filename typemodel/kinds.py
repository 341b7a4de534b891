"""
The registry of type-expression kinds.

Every variant of the type model carries exactly one of these as its `kind`.
The string value is what lands in serialized records, so renaming a member
is harmless but changing a value breaks anything already persisted.
"""
import enum

class TypeKind(enum.Enum):
	ARRAY = "array"
	INTERSECTION = "intersection"
	INTRINSIC = "intrinsic"
	LITERAL = "literal"
	OPTIONAL = "optional"
	REFERENCE = "reference"
	REST = "rest"
	SIGNATURE = "signature"
	SIGNATURE_PARAMETER = "signatureParameter"
	TUPLE = "tuple"
	TYPE_OPERATOR = "typeOperator"
	TYPE_PARAMETER = "typeParameter"
	UNION = "union"
	UNKNOWN = "unknown"
