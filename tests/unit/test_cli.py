"""
Unit tests for the hofkit command-line interface.
"""

import json
import logging

import pytest

from hofkit.cli import ExpressionError, compile_function, parse_value


class TestParsing:
    """Tests for expression and value parsing."""

    def test_parse_json_values(self):
        """JSON values are decoded."""
        assert parse_value("12") == 12
        assert parse_value("[1, 2]") == [1, 2]
        assert parse_value('"quoted"') == "quoted"

    def test_parse_plain_string(self):
        """Non-JSON text is kept as a string."""
        assert parse_value("Walter") == "Walter"

    def test_compile_function(self):
        """Expressions compile to callables."""
        assert compile_function("x", "x * x")(4) == 16
        assert compile_function("acc, x", "acc + x")(1, 2) == 3

    def test_compile_function_helpers(self):
        """Helper names are available in expressions."""
        assert compile_function("x", "between(4, 6)(x)")(5)

    def test_compile_function_syntax_error(self):
        """Bad syntax raises ExpressionError."""
        with pytest.raises(ExpressionError, match="invalid expression"):
            compile_function("x", "x +")


class TestCommands:
    """Tests for CLI commands."""

    def test_map(self, run_cli):
        """map prints the mapped list as JSON."""
        code, out, _ = run_cli("map", "x * x", "10", "11", "12", "20")
        assert code == 0
        assert json.loads(out) == [100, 121, 144, 400]

    def test_filter(self, run_cli):
        """filter prints the retained values."""
        code, out, _ = run_cli("filter", "is_even(x)", "1", "2", "3", "4", "5", "6", "890")
        assert code == 0
        assert json.loads(out) == [2, 4, 6, 890]

    def test_reduce(self, run_cli):
        """reduce folds with the given seed."""
        code, out, _ = run_cli("reduce", "--seed", "0", "acc + x", "3", "6", "891")
        assert code == 0
        assert json.loads(out) == 900

    def test_reduce_strings(self, run_cli):
        """reduce works on plain string values."""
        code, out, _ = run_cli("reduce", "--seed", '""', "acc + x", "a", "b")
        assert code == 0
        assert json.loads(out) == "ab"

    def test_reduce_default_seed(self, run_cli):
        """reduce starts from 0 when no seed is given."""
        code, out, _ = run_cli("reduce", "acc + x", "3", "6", "891")
        assert code == 0
        assert json.loads(out) == 900

    def test_reduce_empty_returns_seed(self, run_cli):
        """reduce with no values prints the seed."""
        code, out, _ = run_cli("reduce", "-s", "[1]", "acc + [x]")
        assert code == 0
        assert json.loads(out) == [1]

    def test_map_dict(self, run_cli):
        """map-dict transforms every value."""
        code, out, _ = run_cli("map-dict", "increase_by_percent(10)(x)", '{"A": 1000, "B": 6000}')
        assert code == 0
        assert json.loads(out) == {"A": 1100, "B": 6600}

    def test_filter_dict(self, run_cli):
        """filter-dict keeps matching entries."""
        code, out, _ = run_cli("filter-dict", "x < 3000", '{"A": 1000, "B": 6000}')
        assert code == 0
        assert json.loads(out) == {"A": 1000}

    def test_filter_dict_requires_object(self, run_cli):
        """A non-object mapping argument is an error."""
        code, _, err = run_cli("filter-dict", "x < 3000", "[1, 2]")
        assert code == 1
        assert "JSON object" in err

    def test_callback_failure_exit_code(self, run_cli):
        """A failing expression reports the element and exits with 1."""
        code, out, err = run_cli("map", "1 / x", "1", "0", "2")
        assert code == 1
        assert out == ""
        assert "map_seq[1]" in err
        assert "ZeroDivisionError" in err

    def test_syntax_error_exit_code(self, run_cli):
        """A malformed expression exits with 1."""
        code, _, err = run_cli("map", "x +", "1")
        assert code == 1
        assert "invalid expression" in err

    def test_demo_all(self, run_cli):
        """demo runs every section."""
        code, out, _ = run_cli("demo")
        assert code == 0
        for section in ("map", "filter", "reduce", "dict"):
            assert section in out
        assert "=> 900" in out
        assert '"This is a text"' in out

    def test_demo_dict(self, run_cli):
        """demo dict shows the population examples only."""
        code, out, _ = run_cli("demo", "dict")
        assert code == 0
        assert '{"City 1": 1100, "City 3": 2750}' in out
        assert "reduce_seq" not in out

    def test_info(self, run_cli):
        """info lists the operations."""
        code, out, _ = run_cli("info")
        assert code == 0
        assert "filter_assoc" in out

    def test_no_command(self, run_cli):
        """No command prints help and succeeds."""
        code, out, _ = run_cli()
        assert code == 0
        assert "usage" in out

    def test_debug_logging(self, run_cli, caplog):
        """Library failures are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="hofkit"):
            run_cli("--log-level", "debug", "filter", "x > 1", "1", "null")
        assert any("filter_seq[1]" in record.getMessage() for record in caplog.records)
