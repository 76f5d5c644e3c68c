"""Unit tests for SignatureLoader."""

import json

import pytest

from pysharp_reflector.domain.models.python import (
    ConstantType,
    ParameterKind,
    PythonConstant,
    PythonTypeSpec,
)
from pysharp_reflector.domain.services.loading import SignatureLoader


class TestSignatureLoader:
    """Tests for JSON signature loading."""

    @pytest.mark.unit
    def test_load_file(self, signature_file):
        functions = SignatureLoader.load(signature_file)

        assert [f.name for f in functions] == ["load_model", "set_flags"]

        load_model = functions[0]
        kinds = [p.kind for p in load_model.parameters]
        assert kinds == [
            ParameterKind.NORMAL,
            ParameterKind.POSITIONAL_ONLY_MARKER,
            ParameterKind.NORMAL,
            ParameterKind.VARIADIC_POSITIONAL,
            ParameterKind.NORMAL,
            ParameterKind.VARIADIC_KEYWORD,
        ]
        assert load_model.parameters[0].type == PythonTypeSpec("str")
        assert load_model.parameters[2].default_value == PythonConstant.integer(32)
        assert load_model.parameters[4].is_keyword_only
        assert load_model.parameters[3].default_value is None

    @pytest.mark.unit
    def test_based_integer_defaults(self, signature_document):
        set_flags = SignatureLoader.parse(signature_document)[1]

        assert set_flags.parameters[0].default_value == PythonConstant.hex_integer(255)
        assert set_flags.parameters[1].default_value.type is ConstantType.BIN_INTEGER

    @pytest.mark.unit
    def test_bare_list_and_nested_types(self):
        document = [
            {
                "name": "f",
                "parameters": [
                    {"name": "m", "type": {"name": "dict", "arguments": ["str", {"name": "list", "arguments": ["int"]}]}},
                    {"name": "s", "default": {"type": "string"}},
                    {"name": "n", "default": {"type": "none"}},
                    {"name": "r", "default": {"type": "float", "value": 2}},
                ],
            }
        ]

        parameters = SignatureLoader.parse(document)[0].parameters

        assert str(parameters[0].type) == "dict[str, list[int]]"
        assert parameters[1].default_value == PythonConstant.string(None)
        assert parameters[1].type == PythonTypeSpec.ANY
        assert parameters[2].default_value == PythonConstant.none()
        assert parameters[3].default_value == PythonConstant.float_(2.0)
        assert isinstance(parameters[3].default_value.value, float)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("document", "message"),
        [
            ({"functions": {}}, "functions: expected a list"),
            ([{"parameters": []}], r"<root>\[0\].name"),
            ([{"name": "f", "parameters": [{"name": "x", "kind": "star"}]}], "unknown parameter kind 'star'"),
            (
                [{"name": "f", "parameters": [{"name": "x", "default": {"type": "octal", "value": 8}}]}],
                "unknown constant type 'octal'",
            ),
            (
                [{"name": "f", "parameters": [{"name": "x", "default": {"type": "integer", "value": "1"}}]}],
                "str is not valid for integer",
            ),
            (
                [{"name": "f", "parameters": [{"name": "x", "default": {"type": "integer", "value": True}}]}],
                "bool is not valid for integer",
            ),
            (
                [{"name": "f", "parameters": [{"name": "r", "default": {"type": "float", "value": 10**400}}]}],
                r"parameters\[0\]\.default\.value: .* too large for a float",
            ),
            ([{"name": "f", "parameters": [{"name": "x", "keyword_only": "yes"}]}], "keyword_only"),
            ([{"name": "f", "parameters": [{"name": "x", "type": 3}]}], "expected a type name"),
        ],
    )
    def test_malformed_documents(self, document, message):
        with pytest.raises(ValueError, match=message):
            SignatureLoader.parse(document)

    @pytest.mark.unit
    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            SignatureLoader.load(path)

    @pytest.mark.unit
    def test_function_without_parameters(self, tmp_path):
        path = tmp_path / "one.json"
        path.write_text(json.dumps({"functions": [{"name": "noop"}]}), encoding="utf-8")

        functions = SignatureLoader.load(path)

        assert functions[0].name == "noop"
        assert functions[0].parameters == ()
