"""
Tests for the method registry and built-in methods
"""
import pytest

from seam_rpc.rpc.errors import HandlerError
from seam_rpc.rpc.methods import BuiltinMethod, add, default_registry, echo
from seam_rpc.rpc.registry import MethodRegistry


class TestMethodRegistry:
    """Test name -> handler lookup"""

    def test_default_registry_serves_builtin_methods(self):
        registry = default_registry()
        assert sorted(registry.names()) == ["add", "echo"]
        assert registry.resolve("echo") is echo
        assert registry.resolve(BuiltinMethod.ADD.value) is add
        assert len(registry) == 2

    def test_unknown_method_resolves_to_none(self):
        assert default_registry().resolve("nope") is None

    def test_lookup_is_case_sensitive(self):
        registry = default_registry()
        assert registry.resolve("Echo") is None
        assert "ECHO" not in registry
        assert "echo" in registry

    def test_registry_is_read_only(self):
        handlers = {"ping": lambda params: "pong"}
        registry = MethodRegistry(handlers)
        handlers["late"] = lambda params: None
        assert registry.resolve("late") is None
        with pytest.raises(TypeError):
            registry._handlers["other"] = lambda params: None

    def test_rejects_invalid_entries(self):
        with pytest.raises(ValueError, match="Invalid method name"):
            MethodRegistry({"": lambda params: None})
        with pytest.raises(ValueError, match="not callable"):
            MethodRegistry({"ping": "pong"})


class TestEcho:
    """Test the echo method"""

    def test_returns_text_unchanged(self):
        assert echo({"text": "Hello, STDIO RPC!"}) == "Hello, STDIO RPC!"
        assert echo({"text": ""}) == ""

    @pytest.mark.parametrize("params", [None, "hi", ["hi"], {}, {"message": "hi"}, {"text": 5}])
    def test_rejects_wrong_shape(self, params):
        with pytest.raises(HandlerError, match="echo expects"):
            echo(params)


class TestAdd:
    """Test the add method"""

    def test_adds_two_numbers(self):
        assert add([10, 15]) == 25
        assert add([18, 6]) == 24
        assert add([1.5, -0.5]) == 1.0

    @pytest.mark.parametrize("params", [None, [], [1], [1, 2, 3], {"a": 1, "b": 2}, "12"])
    def test_rejects_wrong_arity(self, params):
        with pytest.raises(HandlerError, match="array of two numbers"):
            add(params)

    @pytest.mark.parametrize("params", [["1", 2], [1, None], [True, 1]])
    def test_rejects_non_numbers(self, params):
        with pytest.raises(HandlerError, match="add expects numbers"):
            add(params)
