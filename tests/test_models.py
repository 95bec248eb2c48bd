"""Tests for routegen.models -- steps, requests and results."""

from __future__ import annotations

from pathlib import Path

import pytest

from routegen.exceptions import AnswerBundleError
from routegen.exit_codes import EXIT_GENERIC_FAILURE
from routegen.models import (
    STEPS,
    GenerationRequest,
    GenerationResult,
    GeneratorDefaults,
    HTTPMethod,
    Step,
)


def _answers(**overrides):
    answers = {
        "routename": "users/[id]",
        "httpmethod": "GET",
        "template": "basic",
        "typescript": False,
        "basedirectory": "/tmp/x",
    }
    answers.update(overrides)
    return answers


class TestStep:
    def test_order(self) -> None:
        assert [s.value for s in STEPS] == [
            "Route Name",
            "HTTP Method",
            "Template",
            "TypeScript",
            "Base Directory",
        ]

    def test_keys_are_lowercase_without_spaces(self) -> None:
        assert [s.key for s in STEPS] == [
            "routename",
            "httpmethod",
            "template",
            "typescript",
            "basedirectory",
        ]


class TestHTTPMethod:
    def test_values_are_export_names(self) -> None:
        assert [m.value for m in HTTPMethod] == ["GET", "POST", "PUT", "PATCH", "DELETE"]


class TestGenerationRequest:
    def test_from_complete_answers(self) -> None:
        request = GenerationRequest.from_answers(_answers())
        assert request.route_name == "users/[id]"
        assert request.method is HTTPMethod.GET
        assert request.template == "basic"
        assert request.use_typescript is False
        assert request.base_dir == Path("/tmp/x")
        assert request.extension == "js"

    def test_typescript_extension(self) -> None:
        request = GenerationRequest.from_answers(_answers(typescript=True))
        assert request.extension == "ts"

    def test_empty_base_directory_uses_default(self, tmp_path: Path) -> None:
        defaults = GeneratorDefaults(base_dir=tmp_path)
        request = GenerationRequest.from_answers(_answers(basedirectory=""), defaults)
        assert request.base_dir == tmp_path

    def test_whitespace_base_directory_uses_default(self, tmp_path: Path) -> None:
        defaults = GeneratorDefaults(base_dir=tmp_path)
        request = GenerationRequest.from_answers(_answers(basedirectory="   "), defaults)
        assert request.base_dir == tmp_path

    def test_missing_typescript_uses_default(self) -> None:
        answers = _answers()
        del answers["typescript"]
        request = GenerationRequest.from_answers(answers, GeneratorDefaults(use_typescript=True))
        assert request.use_typescript is True

    def test_default_base_dir_is_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        answers = _answers()
        del answers["basedirectory"]
        assert GenerationRequest.from_answers(answers).base_dir.resolve() == tmp_path.resolve()

    def test_route_name_is_trimmed(self) -> None:
        request = GenerationRequest.from_answers(_answers(routename="  users  "))
        assert request.route_name == "users"

    @pytest.mark.parametrize("missing", ["routename", "httpmethod", "template"])
    def test_missing_answer_raises(self, missing: str) -> None:
        answers = _answers()
        del answers[missing]
        with pytest.raises(AnswerBundleError, match="Missing answers"):
            GenerationRequest.from_answers(answers)

    def test_invalid_method_raises(self) -> None:
        with pytest.raises(AnswerBundleError) as excinfo:
            GenerationRequest.from_answers(_answers(httpmethod="TRACE"))
        assert excinfo.value.exit_code == EXIT_GENERIC_FAILURE

    def test_blank_route_name_raises(self) -> None:
        with pytest.raises(AnswerBundleError):
            GenerationRequest.from_answers(_answers(routename="   "))

    def test_request_is_frozen(self) -> None:
        request = GenerationRequest.from_answers(_answers())
        with pytest.raises(Exception):
            request.route_name = "other"


class TestGenerationResult:
    def test_success_without_error(self) -> None:
        assert GenerationResult(route_name="users", path=Path("/x")).success

    def test_failure_with_error(self) -> None:
        assert not GenerationResult(route_name="users", error="boom").success
