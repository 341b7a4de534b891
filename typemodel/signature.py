"""
Signatures: the types of callable things.

	() => string
	<A>(arg: A) => A
	(x: number, ...rest: string[]) => void

A signature owns its type-parameters, its parameters, and its return type.
Nothing in there is shared with any other node.
"""
from typing import Sequence
from .abstract import Type, wrap, cloned
from .kinds import TypeKind
from .variants import TypeParameterType

class MisplacedParameter(AssertionError):
	""" Somebody tried to render a parameter outside of a parameter list. """

class SignatureType(Type):
	kind = TypeKind.SIGNATURE
	type_parameters: list[TypeParameterType]
	parameters: list["SignatureParameterType"]
	return_type: Type
	
	def __init__(self, type_parameters:Sequence[TypeParameterType], parameters:Sequence["SignatureParameterType"], return_type:Type):
		assert isinstance(return_type, Type), return_type
		self.type_parameters = list(type_parameters)
		self.parameters = list(parameters)
		self.return_type = return_type
	
	def clone(self):
		return SignatureType(cloned(self.type_parameters), cloned(self.parameters), self.return_type.clone())
	
	def stringify(self, wrapped:bool, use_arrow:bool=False) -> str:
		"""
		Function-type position wants `(x: A) => B`.
		Method and property-signature position wants `(x: A): B`,
		which is what `use_arrow` selects.
		"""
		type_parameters = ", ".join(tp.stringify(False) for tp in self.type_parameters)
		parameters = ", ".join(p.stringify(False) for p in self.parameters)
		return_indicator = ": " if use_arrow else " => "
		generic = "<%s>" % type_parameters if type_parameters else ""
		text = generic + "(%s)" % parameters + return_indicator + self.return_type.stringify(False)
		return wrap(wrapped, text)
	
	def serialize(self, serializer, init:dict) -> dict:
		return {
			**init,
			"typeParameters": serializer.to_objects(self.type_parameters),
			"parameters": serializer.to_objects(self.parameters),
			"returnType": serializer.to_object(self.return_type),
		}

class SignatureParameterType(Type):
	kind = TypeKind.SIGNATURE_PARAMETER
	
	# NB: Nothing stops is_rest and is_optional from both being true.
	#     The result renders as `...name?: T`, which no language accepts.
	def __init__(self, name:str, is_optional:bool, is_rest:bool, parameter_type:Type):
		assert isinstance(name, str) and name, name
		assert isinstance(parameter_type, Type), parameter_type
		self.name = name
		self.is_optional = is_optional
		self.is_rest = is_rest
		self.parameter_type = parameter_type
	
	def clone(self):
		return SignatureParameterType(self.name, self.is_optional, self.is_rest, self.parameter_type.clone())
	
	def stringify(self, wrapped:bool) -> str:
		if wrapped is not False:
			raise MisplacedParameter("SignatureParameterTypes may not be contained within other types.")
		return (
			("..." if self.is_rest else "")
			+ self.name
			+ ("?" if self.is_optional else "")
			+ ": "
			+ self.parameter_type.stringify(False)
		)
	
	def serialize(self, serializer, init:dict) -> dict:
		return {
			**init,
			"name": self.name,
			"isOptional": self.is_optional,
			"isRest": self.is_rest,
			"parameterType": serializer.to_object(self.parameter_type),
		}
