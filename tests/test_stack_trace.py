from __future__ import annotations

from sasato_res.utils.stack_trace import format_stack_trace, qualified_type_name


class _Outer:
    class InnerError(Exception):
        pass

    def fail(self) -> None:
        raise self.InnerError("nested")


def _level_two() -> None:
    raise KeyError("missing")


def _level_one() -> None:
    _level_two()


def test_qualified_type_name_for_builtin_and_nested_classes():
    assert qualified_type_name(ValueError()) == "builtins.ValueError"
    assert qualified_type_name(_Outer.InnerError()) == f"{__name__}._Outer.InnerError"


def test_raised_trace_lists_frames_outermost_first():
    try:
        _level_one()
    except KeyError as exc:
        trace = format_stack_trace(exc)

    lines = trace.split("\n")
    assert lines[0].startswith(f"{__name__}.test_raised_trace_lists_frames_outermost_first(")
    assert lines[1].startswith(f"{__name__}._level_one(test_stack_trace.py:")
    assert lines[2].startswith(f"{__name__}._level_two(test_stack_trace.py:")
    assert len(lines) == 3


def test_method_frames_use_qualified_function_name():
    try:
        _Outer().fail()
    except _Outer.InnerError as exc:
        trace = format_stack_trace(exc)
    assert "_Outer.fail(test_stack_trace.py:" in trace or ".fail(test_stack_trace.py:" in trace


def test_unraised_exception_uses_capturing_stack():
    trace = format_stack_trace(RuntimeError("never raised"))
    assert "test_unraised_exception_uses_capturing_stack(test_stack_trace.py:" in trace
    assert "sasato_res.utils.stack_trace" not in trace
