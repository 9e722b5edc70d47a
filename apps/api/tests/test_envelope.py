"""
Tests del envelope y del builder.
No requieren FastAPI ni variables de entorno.
"""

import json

import pytest

from apiresponse.envelope import ResponseEnvelope, fail, new, ok, reason_phrase

# ===========================================================================
# Tests: new / builder
# ===========================================================================


class TestBuilder:
    def test_new_has_defaults(self):
        env = new()

        assert env.code == 200
        assert env.success is True
        assert env.message == "OK"
        assert env.error is None
        assert env.data is None

    def test_each_call_returns_fresh_envelope(self):
        a = new().set_data({"id": 1})
        b = new()

        assert a is not b
        assert b.data is None

    def test_setters_return_self_for_chaining(self):
        env = new()
        result = (
            env.set_code(418)
            .set_success(False)
            .set_message("teapot")
            .set_data([1, 2])
            .set_error("boom")
        )

        assert result is env
        assert env == ResponseEnvelope(code=418, success=False, message="teapot", error="boom", data=[1, 2])

    def test_set_message_does_not_substitute_default(self):
        env = new().set_code(404).set_message("")

        assert env.message == ""

    def test_setters_accept_any_value(self):
        env = new().set_code(-1).set_data(object)

        assert env.code == -1
        assert env.data is object


# ===========================================================================
# Tests: ok / fail / reason_phrase
# ===========================================================================


class TestFactories:
    @pytest.mark.parametrize("code", [200, 201, 404, 500, 999])
    def test_ok_keeps_non_empty_message(self, code):
        assert ok(code, "hecho").to_dict() == {"code": code, "success": True, "message": "hecho"}

    @pytest.mark.parametrize(
        "code, phrase",
        [
            (200, "OK"),
            (201, "Created"),
            (204, "No Content"),
            (401, "Unauthorized"),
            (404, "Not Found"),
            (503, "Service Unavailable"),
        ],
    )
    def test_ok_empty_message_uses_reason_phrase(self, code, phrase):
        assert ok(code, "").message == phrase

    def test_fail_sets_success_false_regardless_of_code(self):
        env = fail(200, "")

        assert env.success is False
        assert env.code == 200
        assert env.message == "OK"

    def test_fail_not_found_default_message(self):
        assert fail(404, "").message == "Not Found"

    def test_ok_success_flag_not_recomputed_from_code(self):
        assert ok(500, "x").success is True

    def test_reason_phrase_unknown_code_is_empty(self):
        assert reason_phrase(999) == ""
        assert ok(999, "").message == ""

    def test_reason_phrase_known_code(self):
        assert reason_phrase(502) == "Bad Gateway"

    @pytest.mark.parametrize(
        "code, phrase",
        [
            (413, "Request Entity Too Large"),
            (414, "Request URI Too Long"),
            (416, "Requested Range Not Satisfiable"),
            (418, "I'm a teapot"),
            (422, "Unprocessable Entity"),
        ],
    )
    def test_reason_phrase_does_not_depend_on_python_version(self, code, phrase):
        """La redacción de HTTPStatus cambió en 3.13; estas frases quedan fijas."""
        assert reason_phrase(code) == phrase
        assert fail(code, "").message == phrase


# ===========================================================================
# Tests: serialización
# ===========================================================================


class TestToDict:
    def test_unset_error_and_data_are_omitted(self):
        body = ok(200, "done").to_dict()

        assert "error" not in body
        assert "data" not in body

    def test_data_included_when_set(self):
        assert ok(200, "done").set_data({"id": 1}).to_dict()["data"] == {"id": 1}

    def test_error_included_when_set(self):
        assert fail(500, "boom").set_error("stacktrace...").to_dict()["error"] == "stacktrace..."

    def test_falsy_but_set_values_are_kept(self):
        """Solo None cuenta como ausente; {} / [] / 0 / False se serializan."""
        body = ok(200, "x").set_data([]).set_error(0).to_dict()

        assert body["data"] == []
        assert body["error"] == 0

    def test_key_order(self):
        body = fail(500, "boom").set_data(1).set_error(2).to_dict()

        assert list(body) == ["code", "success", "message", "error", "data"]

    def test_code_serializes_as_plain_int(self):
        body = new().to_dict()

        assert json.dumps(body) == '{"code": 200, "success": true, "message": "OK"}'
