"""Tests for izgood.engine — evaluate() semantics."""

import logging
from typing import Any

import pytest

from izgood.checks import email, max_length, not_empty
from izgood.config import ValidationConfig
from izgood.engine import check_rule, evaluate, is_valid
from izgood.errors import CheckResultError, ConfigurationError, RuleDefinitionError
from izgood.http.forms import FormData
from izgood.result import FieldError
from izgood.rules import Rule


def always(result: Any):
    def check(value: Any) -> Any:
        return result

    return check


class TestMessages:
    def test_false_uses_default_message(self) -> None:
        errors = evaluate({}, [("a", always(False))])
        assert errors == [FieldError("a", "Invalid input")]

    def test_string_uses_check_reason(self) -> None:
        errors = evaluate({}, [("a", always("X"))])
        assert errors == [FieldError("a", "X")]

    def test_rule_message_overrides_false(self) -> None:
        errors = evaluate({}, [("a", always(False), "Custom")])
        assert errors.get_messages() == ["Custom"]

    def test_rule_message_overrides_reason(self) -> None:
        errors = evaluate({}, [("a", always("from check"), "Custom")])
        assert errors.get_messages() == ["Custom"]

    def test_configured_default_message(self) -> None:
        config = ValidationConfig(default_message="Nope")
        errors = evaluate({}, [("a", always(False))], config=config)
        assert errors.get_messages() == ["Nope"]

    def test_empty_string_uses_default_message(self) -> None:
        errors = evaluate({}, [("a", always(""))])
        assert errors.get_messages() == ["Invalid input"]

    def test_empty_string_with_rule_message(self) -> None:
        errors = evaluate({}, [("a", always(""), "Custom")])
        assert errors.get_messages() == ["Custom"]

    def test_invalid_config_rejected(self) -> None:
        config = ValidationConfig(default_message="")
        with pytest.raises(ConfigurationError, match="default_message"):
            evaluate({}, [("a", always(False))], config=config)

    @pytest.mark.parametrize("result", [True, None])
    def test_passing_results_emit_nothing(self, result: Any) -> None:
        assert evaluate({}, [("a", always(result))]) == []


class TestEvaluate:
    def test_all_passing_is_empty(self) -> None:
        source = {"a": "", "b": None}
        rules = [("a", always(True)), ("b", always(True)), ("c", always(True))]
        errors = evaluate(source, rules)
        assert not errors
        assert len(errors) == 0

    def test_declaration_order(self) -> None:
        rules = [("b", always(False)), ("a", always("r")), ("b", always("s"))]
        errors = evaluate({}, rules)
        assert [(e.name, e.message) for e in errors] == [
            ("b", "Invalid input"),
            ("a", "r"),
            ("b", "s"),
        ]

    def test_no_short_circuit(self) -> None:
        calls: list[str] = []

        def tracking(label: str):
            def check(value: Any) -> bool:
                calls.append(label)
                return False

            return check

        evaluate({}, [("a", tracking("first")), ("a", tracking("second"))])
        assert calls == ["first", "second"]

    def test_multiple_errors_same_field(self) -> None:
        rules = [("username", not_empty), ("username", email, "Must be an email")]
        errors = evaluate({"username": ""}, rules)
        assert errors.get_messages("username") == ["Invalid input", "Must be an email"]

    def test_cardinality_bounded_by_rules(self) -> None:
        rules = [("a", always(False)), ("b", always(True)), ("c", always("x"))]
        assert len(evaluate({}, rules)) <= len(rules)

    def test_deterministic(self) -> None:
        source = {"user": {"email": "bad"}, "name": ""}
        rules = [("user.email", email), ("name", not_empty), ("name", max_length(2))]
        first = evaluate(source, rules)
        for _ in range(5):
            assert evaluate(source, rules) == first

    def test_args_passed_to_check(self) -> None:
        def at_least(value: Any, minimum: int) -> bool:
            return len(value or "") >= minimum

        rules = [("code", at_least, "Too short", 3)]
        assert evaluate({"code": "ab"}, rules).get_messages() == ["Too short"]
        assert evaluate({"code": "abc"}, rules) == []

    def test_absent_value_passed_as_none(self) -> None:
        seen: list[Any] = []
        evaluate({}, [("missing", lambda v: seen.append(v) or True)])
        assert seen == [None]

    def test_none_source(self) -> None:
        errors = evaluate(None, [("a", not_empty)])
        assert errors.has_errors("a")

    def test_accepts_generator(self) -> None:
        errors = evaluate({}, (r for r in [("a", always(False))]))
        assert len(errors) == 1

    def test_mixed_declarations(self) -> None:
        rules = [
            Rule("a", always(False)),
            ("b", always(False)),
            {"name": "c", "check": always(False), "message": "m"},
        ]
        assert evaluate({}, rules).names() == ["a", "b", "c"]


class TestSources:
    def test_nested_record(self) -> None:
        source = {"user": {"contact": {"email": "a@b.com"}}}
        rules = [
            ("user.contact.email", email),
            ("user[contact][email]", email),
            ("user.missing.email", not_empty, "Required"),
        ]
        errors = evaluate(source, rules)
        assert errors == [FieldError("user.missing.email", "Required")]

    def test_form_submission(self) -> None:
        form = FormData({"username": ["bob"]})
        rules = [
            ("username", not_empty),
            ("password", not_empty, "An empty password would not be secure"),
        ]
        errors = evaluate(form, rules)
        assert not errors.has_errors("username")
        assert errors.get_messages("password") == ["An empty password would not be secure"]


class TestMalformedRules:
    def test_non_callable_check_raises(self) -> None:
        with pytest.raises(TypeError):
            evaluate({}, [("a", "not callable")])

    def test_bad_tuple_raises(self) -> None:
        with pytest.raises(RuleDefinitionError):
            evaluate({}, [("a",)])

    def test_bad_result_type_raises(self) -> None:
        with pytest.raises(CheckResultError):
            evaluate({}, [("a", always(1))])

    def test_check_exception_propagates(self) -> None:
        def boom(value: Any) -> bool:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            evaluate({}, [("a", boom)])


class TestHelpers:
    def test_check_rule_pass(self) -> None:
        assert check_rule(Rule("a", always(True)), {}) is None

    def test_check_rule_fail(self) -> None:
        assert check_rule(Rule("a", always("r")), {}) == FieldError("a", "r")

    def test_is_valid(self) -> None:
        assert is_valid({"a": "x"}, [("a", not_empty)])
        assert not is_valid({}, [("a", not_empty)])


class TestLogging:
    def test_failures_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="izgood.engine"):
            evaluate({}, [("a", always("bad"))])
        assert "Rule failed for 'a': bad" in caplog.text
        assert "Evaluated 1 rule(s), 1 error(s)" in caplog.text
