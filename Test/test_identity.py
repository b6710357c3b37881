import functools
import unittest

from logfactory.errors import InvalidIdentityError
from logfactory.identity import FunctionIdentity, InstanceIdentity, classify


def bar():
    pass


class Foo:
    def method(self):
        pass


class TestClassify(unittest.TestCase):
    def test_named_function(self):
        ident = classify(bar)
        self.assertEqual(ident, FunctionIdentity("bar"))
        self.assertEqual(ident.context(), {"func_name": "bar"})

    def test_nameless_function_gives_empty_string(self):
        def f():
            pass

        f.__name__ = ""
        ident = classify(f)
        self.assertEqual(ident.name, "")
        self.assertEqual(ident.context(), {"func_name": ""})

    def test_lambda_keeps_python_name(self):
        self.assertEqual(classify(lambda: None).name, "<lambda>")

    def test_function_with_attributes_is_still_function(self):
        def tagged():
            pass

        tagged.extra = {"a": 1}
        self.assertIsInstance(classify(tagged), FunctionIdentity)

    def test_method_is_ignored_for_functions(self):
        ident = classify(bar, "other")
        self.assertEqual(ident.context(), {"func_name": "bar"})

    def test_bound_method_builtin_partial_and_class(self):
        self.assertEqual(classify(Foo().method).name, "method")
        self.assertEqual(classify(len).name, "len")
        self.assertEqual(classify(functools.partial(bar)).name, "bar")
        self.assertEqual(classify(Foo), FunctionIdentity("Foo"))

    def test_descriptors_and_wrappers_are_functions(self):
        self.assertEqual(classify(str.upper), FunctionIdentity("upper"))
        self.assertEqual(classify([].__len__), FunctionIdentity("__len__"))
        self.assertEqual(classify(object.__init__), FunctionIdentity("__init__"))
        self.assertEqual(
            classify(dict.__dict__["fromkeys"]), FunctionIdentity("fromkeys")
        )

    def test_instance_without_method(self):
        ident = classify(Foo())
        self.assertEqual(ident, InstanceIdentity("Foo"))
        self.assertEqual(ident.context(), {"class_name": "Foo"})

    def test_instance_with_method(self):
        ident = classify(Foo(), "method")
        self.assertEqual(
            ident.context(), {"class_name": "Foo", "func_name": "method"}
        )

    def test_instance_with_empty_method(self):
        self.assertEqual(classify(Foo(), "").context(), {"class_name": "Foo"})

    def test_containers_are_instances(self):
        self.assertEqual(classify({}).class_name, "dict")
        self.assertEqual(classify([1]).class_name, "list")

    def test_callable_instance_is_instance(self):
        class Handler:
            def __call__(self):
                pass

        self.assertEqual(classify(Handler()), InstanceIdentity("Handler"))

    def test_invalid_values_raise(self):
        for value in (None, 42, 3.5, True, "text", b"raw"):
            with self.assertRaises(InvalidIdentityError):
                classify(value)

    def test_invalid_identity_is_type_error(self):
        with self.assertRaises(TypeError):
            classify(None)


if __name__ == "__main__":
    unittest.main()
