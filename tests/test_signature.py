import unittest

from typemodel import (
	TypeKind, SignatureType, SignatureParameterType, MisplacedParameter,
	IntrinsicType, ArrayType, UnionType, TypeParameterType,
)

def _x_and_maybe_y():
	return [
		SignatureParameterType("x", False, False, IntrinsicType("number")),
		SignatureParameterType("y", True, False, IntrinsicType("string")),
	]

def _specimen(type_parameters=()):
	return SignatureType([TypeParameterType(n) for n in type_parameters], _x_and_maybe_y(), IntrinsicType("boolean"))

class SignatureRenderingTests(unittest.TestCase):
	
	def test_function_type_position(self):
		self.assertEqual("(x: number, y?: string) => boolean", _specimen().stringify(False))
	
	def test_method_position_with_type_parameter(self):
		self.assertEqual("<A>(x: number, y?: string): boolean", _specimen("A").stringify(False, use_arrow=True))
	
	def test_several_type_parameters(self):
		self.assertEqual("<A, B>(x: number, y?: string) => boolean", str(_specimen("AB")))
	
	def test_empty_parameter_list_still_has_parentheses(self):
		self.assertEqual("() => void", str(SignatureType([], [], IntrinsicType("void"))))
	
	def test_rest_parameter(self):
		sut = SignatureParameterType("args", False, True, ArrayType(IntrinsicType("string")))
		self.assertEqual("...args: string[]", sut.stringify(False))
	
	def test_wrapping(self):
		sut = _specimen()
		self.assertEqual("((x: number, y?: string) => boolean)", sut.stringify(True))
		self.assertEqual("(x: number, y?: string) => boolean", sut.stringify(False))
	
	def test_union_member_gets_parentheses(self):
		sut = UnionType([_specimen(), IntrinsicType("undefined")])
		self.assertEqual("((x: number, y?: string) => boolean) | undefined", str(sut))
	
	def test_signature_as_return_type_is_not_wrapped(self):
		inner = SignatureType([], [], IntrinsicType("void"))
		sut = SignatureType([], [], inner)
		self.assertEqual("() => () => void", str(sut))

class ParameterPreconditionTests(unittest.TestCase):
	
	def test_wrapped_parameter_always_fails(self):
		for sut in _x_and_maybe_y() + [SignatureParameterType("rest", False, True, IntrinsicType("any"))]:
			with self.subTest(sut.name):
				with self.assertRaises(MisplacedParameter):
					sut.stringify(True)
	
	def test_failure_is_an_assertion(self):
		sut = _x_and_maybe_y()[0]
		self.assertRaises(AssertionError, sut.stringify, True)
	
	def test_rest_and_optional_together_is_tolerated(self):
		"""
		Known modeling gap: no language accepts `...args?: T`,
		yet the model lets a parameter be both rest and optional.
		This test pins down that it is accepted, not that it is right.
		"""
		sut = SignatureParameterType("args", True, True, ArrayType(IntrinsicType("string")))
		self.assertEqual("...args?: string[]", sut.stringify(False))
		self.assertTrue(sut.clone().is_rest and sut.clone().is_optional)

class CloneTests(unittest.TestCase):
	
	def test_clone_is_a_distinct_object(self):
		original = _specimen("A")
		duplicate = original.clone()
		self.assertIsNot(original, duplicate)
		self.assertIsNot(original.return_type, duplicate.return_type)
		self.assertIsNot(original.parameters, duplicate.parameters)
		self.assertIsNot(original.type_parameters, duplicate.type_parameters)
		for a, b in zip(original.parameters, duplicate.parameters):
			self.assertIsNot(a, b)
			self.assertIsNot(a.parameter_type, b.parameter_type)
	
	def test_mutating_the_clone_leaves_the_original_alone(self):
		original = _specimen("A")
		before = str(original)
		duplicate = original.clone()
		duplicate.parameters[0].name = "z"
		duplicate.parameters[1].parameter_type.name = "symbol"
		duplicate.parameters.append(SignatureParameterType("w", False, False, IntrinsicType("any")))
		duplicate.type_parameters[0].name = "B"
		duplicate.return_type.name = "void"
		self.assertEqual(before, str(original))
		self.assertEqual("<B>(z: number, y?: symbol, w: any) => void", str(duplicate))
	
	def test_mutating_the_original_leaves_the_clone_alone(self):
		original = _specimen()
		duplicate = original.clone()
		original.parameters[0].is_rest = True
		original.parameters.pop()
		self.assertEqual("(x: number, y?: string) => boolean", str(duplicate))
	
	def test_clone_fidelity_and_kind_stability(self):
		for sut in [_specimen(), _specimen("AB"), *_x_and_maybe_y()]:
			with self.subTest(str(sut)):
				duplicate = sut.clone()
				self.assertEqual(sut.stringify(False), duplicate.stringify(False))
				self.assertIs(sut.kind, duplicate.kind)
	
	def test_parameter_clone_keeps_flags(self):
		sut = SignatureParameterType("n", True, False, IntrinsicType("number"))
		duplicate = sut.clone()
		self.assertEqual(("n", True, False), (duplicate.name, duplicate.is_optional, duplicate.is_rest))
		self.assertIsNot(sut.parameter_type, duplicate.parameter_type)

class KindTests(unittest.TestCase):
	
	def test_kinds(self):
		self.assertIs(TypeKind.SIGNATURE, _specimen().kind)
		self.assertIs(TypeKind.SIGNATURE_PARAMETER, _x_and_maybe_y()[0].kind)
	
	def test_kind_is_read_only(self):
		sut = _specimen()
		with self.assertRaises(AttributeError):
			sut.kind = TypeKind.UNION
		self.assertIs(TypeKind.SIGNATURE, sut.kind)


if __name__ == '__main__':
	unittest.main()
