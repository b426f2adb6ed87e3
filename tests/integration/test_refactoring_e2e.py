#!/usr/bin/env python3
"""
End-to-end tests for the refactoring provider: offered actions, applying
them through the document provider and formatter, and cancellation.
"""

import asyncio
import pytest
from tests.test_utils import in_method, run, with_caret
from listlayout.refactoring import (
    ARGUMENTS, PARAMETERS, ListLayoutRefactoringProvider, RefactoringContext, refactor_document,
)
from listlayout.shared.source_location import TextSpan
from listlayout.utils.config import LayoutOptions


class RecordingFormatter:
    """Formatter that records its calls before delegating."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = []

    async def format(self, document, span):
        self.calls.append((document.text, span))
        return await self.inner.format(document, span)


class StalledDocumentProvider:
    """Document provider that never finishes fetching a tree."""

    def __init__(self, inner):
        self.inner = inner
        self.started = None

    async def get_syntax_tree(self, document):
        self.started.set()
        await asyncio.Event().wait()

    def with_syntax_tree(self, document, tree):
        return self.inner.with_syntax_tree(document, tree)


class StalledFormatter:
    def __init__(self):
        self.started = None

    async def format(self, document, span):
        self.started.set()
        await asyncio.Event().wait()


def _open(document_provider, source):
    text, position = with_caret(source)
    return document_provider.open(text, "Program.cs"), TextSpan.at(position)


def _actions(kind, document_provider, formatter, document, span, options=None):
    provider = ListLayoutRefactoringProvider(kind, document_provider, formatter, options)
    context = RefactoringContext(document=document, span=span)
    run(provider.compute_refactorings(context))
    return context.actions


class TestOfferedActions:
    """Which action is registered"""

    def test_collapsed_list_offers_expand(self, document_provider, formatter):
        document, span = _open(document_provider, in_method("    $Mixin(a, b, c);"))
        actions = _actions(ARGUMENTS, document_provider, formatter, document, span)
        assert [action.title for action in actions] == ["Break arguments apart"]

    def test_expanded_list_offers_collapse(self, document_provider, formatter):
        document, span = _open(document_provider, in_method("    $Mixin(a,", "          b);"))
        actions = _actions(ARGUMENTS, document_provider, formatter, document, span)
        assert [action.title for action in actions] == ["Line-up arguments"]

    def test_parameters_titles(self, document_provider, formatter):
        document, span = _open(document_provider, "class C\n{\n    void $M(int a, int b) { }\n}\n")
        actions = _actions(PARAMETERS, document_provider, formatter, document, span)
        assert [action.title for action in actions] == ["Break parameters apart"]

    def test_nothing_offered_for_single_item(self, document_provider, formatter):
        document, span = _open(document_provider, in_method("    $Mixin(a);"))
        assert _actions(ARGUMENTS, document_provider, formatter, document, span) == []

    def test_nothing_offered_without_list(self, document_provider, formatter):
        document, span = _open(document_provider, "class $C { }")
        assert _actions(ARGUMENTS, document_provider, formatter, document, span) == []
        assert _actions(PARAMETERS, document_provider, formatter, document, span) == []

    def test_computing_does_not_edit(self, document_provider, formatter):
        source = in_method("    $Mixin(a, b, c);")
        document, span = _open(document_provider, source)
        _actions(ARGUMENTS, document_provider, formatter, document, span)
        assert document.text == source.replace("$", "")


class TestApplyingActions:
    """Documents produced by the actions"""

    def test_expand_skips_formatter(self, document_provider, formatter):
        recording = RecordingFormatter(formatter)
        document, span = _open(document_provider, in_method("    $Mixin(a, b, c);"))
        action, = _actions(ARGUMENTS, document_provider, recording, document, span)
        result = run(action.apply())
        assert result.text == in_method("    Mixin(a,", "          b,", "          c);")
        assert recording.calls == []

    def test_collapse_runs_formatter_over_list(self, document_provider, formatter):
        recording = RecordingFormatter(formatter)
        source = in_method("    $Mixin(a,", "             b,", "  c);")
        document, span = _open(document_provider, source)
        action, = _actions(ARGUMENTS, document_provider, recording, document, span)
        result = run(action.apply())
        assert result.text == in_method("    Mixin(a, b, c);")
        (formatted_text, formatted_span), = recording.calls
        assert formatted_text[formatted_span.start:formatted_span.end] == "(a,b,c)"

    def test_toggle_back_and_forth(self, document_provider, formatter):
        source = in_method("    $Call123(alpha, beta, gamma);")
        text, position = with_caret(source)
        span = TextSpan.at(position)
        document = document_provider.open(text, "Program.cs")
        expanded = run(refactor_document(document, span, ARGUMENTS, document_provider, formatter))
        collapsed = run(refactor_document(expanded, span, ARGUMENTS, document_provider, formatter))
        assert expanded.text == in_method("    Call123(alpha,", " " * 12 + "beta,", " " * 12 + "gamma);")
        assert collapsed.text == text

    def test_expand_with_crlf(self, document_provider, formatter):
        document, span = _open(document_provider, "class C\r\n{\r\n    void $M(int a, int b) { }\r\n}\r\n")
        result = run(refactor_document(document, span, PARAMETERS, document_provider, formatter,
                                       LayoutOptions(newline="\r\n")))
        assert result.text == "class C\r\n{\r\n    void M(int a,\r\n           int b) { }\r\n}\r\n"

    def test_inner_list_only(self, document_provider, formatter):
        document, span = _open(document_provider, in_method("    Outer(Inner($x, y), z);"))
        result = run(refactor_document(document, span, ARGUMENTS, document_provider, formatter))
        assert result.text == in_method("    Outer(Inner(x,", "                y), z);")

    def test_unparsed_document(self, document_provider, formatter):
        from listlayout.workspace import Document
        text, position = with_caret(in_method("    $Mixin(a, b);"))
        result = run(refactor_document(Document(text=text), TextSpan.at(position), ARGUMENTS,
                                       document_provider, formatter))
        assert result.text == in_method("    Mixin(a,", "          b);")

    def test_no_action_returns_none(self, document_provider, formatter):
        document, span = _open(document_provider, in_method("    $Mixin();"))
        assert run(refactor_document(document, span, ARGUMENTS, document_provider, formatter)) is None


class TestCancellation:
    """Cancelled tasks leave no partial edits behind"""

    def test_cancel_while_fetching_tree(self, document_provider, formatter):
        stalled = StalledDocumentProvider(document_provider)
        document, span = _open(document_provider, in_method("    $Mixin(a, b);"))
        context = RefactoringContext(document=document, span=span)
        provider = ListLayoutRefactoringProvider(ARGUMENTS, stalled, formatter)

        async def scenario():
            stalled.started = asyncio.Event()
            task = asyncio.ensure_future(provider.compute_refactorings(context))
            await stalled.started.wait()
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        run(scenario())
        assert context.actions == []

    def test_cancel_while_formatting(self, document_provider):
        stalled = StalledFormatter()
        source = in_method("    $Mixin(a,", "          b);")
        document, span = _open(document_provider, source)
        action, = _actions(ARGUMENTS, document_provider, stalled, document, span)

        async def scenario():
            stalled.started = asyncio.Event()
            task = asyncio.ensure_future(action.apply())
            await stalled.started.wait()
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        run(scenario())
        assert document.text == source.replace("$", "")
