"""
C preprocessing of BASSmix headers.

The vendor header includes "bass.h" and <stdint.h>. Neither is needed
for FFI binding, so both are replaced by in-memory virtual includes that
declare only the types bassmix.h refers to. Macro expansion and
conditional compilation are delegated to pcpp.

Output keeps object-like macros that carry a value (the library's
constants) as #define lines; include guards, function-like macros and
conditionals are consumed.
"""

import io
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol

from pcpp import Preprocessor

from bassmix_headers.errors import PreprocessingError, UnavailableHeaderError
from bassmix_headers.platforms import Platform, check_supported
from bassmix_headers.version import Version

# Minimal stand-in for bass.h: calling conventions, handle types, callback
_BASS_STUB = """\
#define WINAPI
#define CALLBACK
#define BASSVERSION {bass_version}
typedef uint32_t DWORD;
typedef uint64_t QWORD;
typedef int BOOL;

typedef DWORD HSTREAM;
typedef DWORD HSYNC;

typedef void (CALLBACK SYNCPROC)(HSYNC, DWORD, DWORD, void*);
"""


@dataclass
class PreprocessingContext:
    """Macro definitions and virtual includes for one preprocessing run."""

    # Macro name -> replacement text, in definition order
    macros: dict[str, str] = field(default_factory=dict)

    # Include file name -> body
    includes: dict[str, str] = field(default_factory=dict)

    def define(self, name: str, value: str = "") -> None:
        self.macros[name] = value

    def add(self, name: str, body: str) -> None:
        self.includes[name] = body

    def prelude(self) -> str:
        """Render the context macros as #define lines."""
        lines = []
        for name, value in self.macros.items():
            lines.append(f"#define {name} {value}".rstrip())
        return "".join(line + "\n" for line in lines)


class HeaderPreprocessor(Protocol):
    """Capability interface of a C preprocessor engine."""

    def process(
        self, source: str, context: PreprocessingContext, source_name: str
    ) -> str: ...


def _is_constant_macro(toks) -> bool:
    """True for ``#define NAME value``; False for empty or function-like macros."""
    if len(toks) < 2 or toks[1].value == "(":
        return False
    for tok in toks[1:]:
        value = tok.value.strip()
        if value and not value.startswith(("//", "/*")):
            return True
    return False


class _ContextPreprocessor(Preprocessor):
    """pcpp Preprocessor serving virtual includes and collecting diagnostics."""

    def __init__(self, virtual_includes: dict[str, str]):
        super().__init__()
        self.virtual_includes = dict(virtual_includes)
        self.diagnostics: list[str] = []
        self.line_directive = None

    def on_file_open(self, is_system_include, includepath):
        name = os.path.basename(includepath)
        if name in self.virtual_includes:
            return io.StringIO(self.virtual_includes[name])
        return super().on_file_open(is_system_include, includepath)

    def on_error(self, file, line, msg):
        self.diagnostics.append(f"{file}:{line} error: {msg}")
        self.return_code += 1

    def on_unknown_macro_function_in_expr(self, ident):
        # Plain identifiers still evaluate to 0 as in C; a call to an
        # undefined function-like macro cannot be evaluated.
        directive = getattr(self, "lastdirective", None)
        self.on_error(
            directive.source if directive is not None else None,
            directive.lineno if directive is not None else 0,
            f"undefined function-like macro '{ident}' in #if expression",
        )
        return super().on_unknown_macro_function_in_expr(ident)

    def on_directive_unknown(self, directive, toks, ifpassthru, precedingtoks):
        if directive.value == "error":
            message = "".join(tok.value for tok in toks).strip()
            self.on_error(directive.source, directive.lineno, f"#error {message}")
            return True
        return super().on_directive_unknown(directive, toks, ifpassthru, precedingtoks)

    def on_directive_handle(self, directive, toks, ifpassthru, precedingtoks):
        handling = super().on_directive_handle(
            directive, toks, ifpassthru, precedingtoks
        )
        if directive.value == "define" and handling is True and _is_constant_macro(toks):
            # Execute and pass through to the output
            return None
        return handling


class PcppPreprocessor:
    """HeaderPreprocessor backed by pcpp."""

    def process(
        self, source: str, context: PreprocessingContext, source_name: str
    ) -> str:
        """
        Preprocess header text with a context.

        Args:
            source: Raw header text.
            context: Macros and virtual includes to apply.
            source_name: File name used in diagnostics and include lookup.

        Returns:
            Preprocessed text, prefixed with the context's #define lines.

        Raises:
            PreprocessingError: If pcpp reports any error.
        """
        engine = _ContextPreprocessor(context.includes)
        engine.add_path(os.path.dirname(source_name) or ".")
        for name, value in context.macros.items():
            engine.define(f"{name} {value}".rstrip())

        engine.parse(source, source_name)
        out = io.StringIO()
        engine.write(out)

        if engine.diagnostics or engine.return_code:
            diagnostics = engine.diagnostics or [
                f"{source_name}: preprocessor exited with {engine.return_code} error(s)"
            ]
            raise PreprocessingError(
                f"Failed to preprocess {source_name}: {diagnostics[0]}",
                diagnostics,
            )

        return context.prelude() + out.getvalue()


class PreprocessorAdapter:
    """Build preprocessing contexts and run them over BASSmix headers."""

    def __init__(self, engine: Optional[HeaderPreprocessor] = None):
        self.engine = engine if engine is not None else PcppPreprocessor()

    def build(
        self, platform: Optional[Platform], version: Version
    ) -> PreprocessingContext:
        """
        Create a fresh context for a platform/version pair.

        Args:
            platform: Target platform, or None for no platform macros.
            version: Library version.

        Returns:
            New PreprocessingContext.

        Raises:
            UnsupportedPlatformError: If the pair is not supported.
        """
        check_supported(platform, version)

        context = PreprocessingContext()
        context.add("stdint.h", "")
        context.add(
            "bass.h", _BASS_STUB.format(bass_version=version.bass_version_code())
        )

        if platform is Platform.WINDOWS:
            context.define("_WIN32", "1")

        return context

    def process(self, path: Path | str, context: PreprocessingContext) -> str:
        """
        Preprocess a header file.

        Args:
            path: Header file to read.
            context: Context from build().

        Returns:
            Preprocessed text ending with exactly one newline.

        Raises:
            UnavailableHeaderError: If the file cannot be read.
            PreprocessingError: If preprocessing fails.
        """
        path = Path(path)
        try:
            source = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise UnavailableHeaderError(f"Failed to read header {path}: {e}") from e

        try:
            text = self.engine.process(source, context, str(path))
        except PreprocessingError:
            raise
        except Exception as e:
            raise PreprocessingError(f"Failed to preprocess {path}: {e}", [str(e)]) from e

        return text.rstrip("\n") + "\n"
