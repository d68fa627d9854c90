"""
Emission tests.
"""

import io

from cfgalias.aliases import emit_signals, format_signal
from cfgalias.config import reset_config


class TestFormatSignal:
    """Single signal lines."""

    def test_default_prefix(self):
        assert format_signal("wasm") == "alias-signal=wasm"

    def test_explicit_prefix(self):
        assert format_signal("wasm", prefix="cargo:rustc-cfg=") == "cargo:rustc-cfg=wasm"

    def test_configured_prefix(self, monkeypatch):
        monkeypatch.setenv("CFGALIAS_SIGNAL_PREFIX", "sig:")
        reset_config()
        assert format_signal("wasm") == "sig:wasm"


class TestEmitSignals:
    """Writing lines to a stream."""

    def test_one_line_per_name(self):
        stream = io.StringIO()
        lines = emit_signals(["a", "b"], stream=stream)
        assert lines == ["alias-signal=a", "alias-signal=b"]
        assert stream.getvalue() == "alias-signal=a\nalias-signal=b\n"

    def test_duplicates_once_first_order(self):
        stream = io.StringIO()
        emit_signals(["b", "a", "b"], stream=stream)
        assert stream.getvalue().splitlines() == ["alias-signal=b", "alias-signal=a"]

    def test_nothing_to_emit(self):
        stream = io.StringIO()
        assert emit_signals([], stream=stream) == []
        assert stream.getvalue() == ""

    def test_defaults_to_stdout(self, capsys):
        emit_signals(["x"], prefix="p=")
        assert capsys.readouterr().out == "p=x\n"
