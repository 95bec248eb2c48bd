"""Tests for routegen.templates -- the four built-in handler templates."""

from __future__ import annotations

import pytest

from routegen.exceptions import UnknownTemplateError
from routegen.models import HTTPMethod
from routegen.templates import TEMPLATES, get_template, list_templates

ALL_KEYS = ["basic", "withParams", "withErrorHandling", "withValidation"]


def _balanced(text: str) -> bool:
    """Every (, { and [ is closed in order."""
    pairs = {")": "(", "}": "{", "]": "["}
    stack: list[str] = []
    for char in text:
        if char in "({[":
            stack.append(char)
        elif char in pairs:
            if not stack or stack.pop() != pairs[char]:
                return False
    return not stack


class TestRegistry:
    def test_four_templates_in_wizard_order(self) -> None:
        assert [t.key for t in list_templates()] == ALL_KEYS

    def test_keys_match_definitions(self) -> None:
        for key, template in TEMPLATES.items():
            assert template.key == key

    def test_label_combines_name_and_description(self) -> None:
        assert get_template("basic").label == "Basic - A simple API route with a JSON response"

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(UnknownTemplateError, match="nope"):
            get_template("nope")


class TestRenderMatrix:
    """Every template renders for both TypeScript settings."""

    @pytest.mark.parametrize("key", ALL_KEYS)
    @pytest.mark.parametrize("use_typescript", [False, True])
    def test_exports_requested_method(self, key: str, use_typescript: bool) -> None:
        text = get_template(key).render(HTTPMethod.PATCH, "users/[id]", use_typescript)
        assert "export async function PATCH(request" in text
        assert _balanced(text)
        assert "{{" not in text and "}}" not in text

    @pytest.mark.parametrize("key", ALL_KEYS)
    def test_typescript_imports_next_request(self, key: str) -> None:
        text = get_template(key).render("GET", "users", True)
        assert "import { NextRequest, NextResponse } from 'next/server';" in text
        assert "request: NextRequest" in text

    @pytest.mark.parametrize("key", ALL_KEYS)
    def test_javascript_has_no_type_annotations(self, key: str) -> None:
        text = get_template(key).render("GET", "users", False)
        assert "import { NextResponse } from 'next/server';" in text
        assert "NextRequest" not in text
        assert ": {" not in text.split("export async function", 1)[1].split(")", 1)[0]

    def test_accepts_method_as_string(self) -> None:
        text = get_template("basic").render("DELETE", "items", False)
        assert "export async function DELETE(request)" in text


class TestTemplateBodies:
    def test_basic_replies_with_route_name(self) -> None:
        text = get_template("basic").render("GET", "users/[id]", False)
        assert "Hello from users/[id]!" in text
        assert "{ status: 200 }" in text

    def test_with_params_reads_path_and_query(self) -> None:
        text = get_template("withParams").render("GET", "posts/[slug]", True)
        assert "{ params }: { params: { [key: string]: string } }" in text
        assert "request.nextUrl.searchParams" in text
        assert "pathParams: params" in text

    def test_with_error_handling_logs_route(self) -> None:
        text = get_template("withErrorHandling").render("POST", "orders", False)
        assert "try {" in text
        assert "console.error('Error in orders:', error);" in text
        assert "{ status: 500 }" in text

    def test_with_validation_has_400_and_500_branches(self) -> None:
        text = get_template("withValidation").render("POST", "signup", False)
        assert "import { z } from 'zod';" in text
        validation_branch = text.index("error instanceof z.ZodError")
        status_400 = text.index("{ status: 400 }")
        status_500 = text.index("{ status: 500 }")
        assert validation_branch < status_400 < status_500
        assert "'Validation failed'" in text
        assert "'Internal Server Error'" in text


class TestStringEscaping:
    @pytest.mark.parametrize("key", ALL_KEYS)
    def test_quote_in_route_name_is_escaped(self, key: str) -> None:
        text = get_template(key).render("GET", "o'reilly", False)
        assert "o\\'reilly" in text
        assert "o'reilly" not in text.replace("o\\'reilly", "")

    def test_backslash_in_route_name_is_escaped(self) -> None:
        text = get_template("basic").render("GET", "a\\b", False)
        assert "'Hello from a\\\\b!'" in text
