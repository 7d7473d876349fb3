"""Tests for operation-specific Rich renderers."""

from minmax.output.renderers import format_value, render_quiet, render_result
from minmax.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, meta: dict[str, object] | None = None, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data), meta=meta)


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── Value formatting ─────────────────────────────────────────────────


class TestFormatValue:
    def test_scalar(self) -> None:
        assert format_value(4.4) == "4.4"

    def test_tuple(self) -> None:
        assert format_value((1, 8)) == "(1, 8)"

    def test_list_from_json_is_shown_as_tuple(self) -> None:
        assert format_value([1, [2, 3]]) == "(1, (2, 3))"


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("min", "NO_OPERANDS", "min requires at least one operand"))
        assert "ERROR" in output
        assert "min" in output
        assert "requires at least one operand" in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("max", "INVALID_OPERAND", "Bad", token="banana", reason="nope")
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "token: banana" in output

    def test_detail_hidden_without_verbose(self) -> None:
        result = _err("max", "INVALID_OPERAND", "Bad", token="banana")
        assert "detail" not in render_result(result)

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="clamp"))
        assert "Unknown error" in output


# ── Operation renderers ──────────────────────────────────────────────


class TestReductionRenderer:
    def test_min(self) -> None:
        output = render_result(_ok("min", result=-2, operands=[1, -2]))
        assert output.splitlines()[0].startswith("OK")
        assert "result: -2" in output
        assert "operands: 1, -2" in output

    def test_tuples(self) -> None:
        output = render_result(_ok("max", result=(1, 8), operands=[(1, 8), (1, 2)]))
        assert "result: (1, 8)" in output
        assert "operands: (1, 8), (1, 2)" in output

    def test_verbose_shows_meta(self) -> None:
        output = render_result(_ok("max", meta={"count": 2}, result=2, operands=[1, 2]), verbose=True)
        assert "meta:" in output
        assert "count: 2" in output

    def test_meta_hidden_without_verbose(self) -> None:
        output = render_result(_ok("max", meta={"count": 2}, result=2, operands=[1, 2]))
        assert "meta" not in output


class TestClampRenderer:
    def test_clamp(self) -> None:
        result = _ok("clamp", result=10, value=16, lower=0, upper=10, clamped="upper")
        output = render_result(result)
        assert "result: 10" in output
        assert "value: 16" in output
        assert "bounds: [0, 10]" in output
        assert "clamped: upper" in output


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("other", answer=42))
        assert "OK" in output
        assert "answer: 42" in output


class TestQuiet:
    def test_result_value_only(self) -> None:
        assert render_quiet(_ok("max", result=(1, 8), operands=[(1, 8)])) == "(1, 8)"

    def test_without_result(self) -> None:
        assert render_quiet(_ok("other")) == "OK: other"

    def test_error(self) -> None:
        assert render_quiet(_err("min", "NO_OPERANDS", "none")) == "ERROR: min — none"
