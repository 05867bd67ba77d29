"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from pathlib import Path

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. Exception constructors receive a
    Diagnostic, never an ad-hoc f-string, which keeps messages:
        - Testable
        - Consistently formatted
        - Documented in one place
    """

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @staticmethod
    def no_translation_files() -> Diagnostic:
        """No catalog file was given on the command line."""
        return Diagnostic(
            code=DiagnosticCode.NO_TRANSLATION_FILES,
            message="need at least one translation file to parse",
            hint="Pass one or more catalog files, e.g. en-US.json fr.json",
        )

    @staticmethod
    def invalid_locale(locale_id: str, reason: str) -> Diagnostic:
        """Locale identifier rejected by CLDR.

        Args:
            locale_id: The rejected identifier
            reason: Underlying parser message

        Returns:
            Diagnostic for INVALID_LOCALE
        """
        msg = f"invalid locale {locale_id!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint="Use a BCP-47 tag such as 'en-US', 'fr' or 'zh-Hans-CN'",
        )

    @staticmethod
    def unsupported_format(format_name: str, supported: tuple[str, ...]) -> Diagnostic:
        """Requested output format has no marshaler.

        Args:
            format_name: The rejected format name
            supported: Format names that are accepted

        Returns:
            Diagnostic for UNSUPPORTED_FORMAT
        """
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_FORMAT,
            message=f"unsupported format: {format_name}",
            hint=f"Use one of: {', '.join(supported)}",
        )

    @staticmethod
    def invalid_factory(value: str) -> Diagnostic:
        """Factory name is not of the form package.Function."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_FACTORY,
            message=f"invalid factory {value!r}: expected <package>.<Function>",
            hint="The default factory is i18n.MustTfunc",
        )

    # ------------------------------------------------------------------
    # Catalog loading
    # ------------------------------------------------------------------

    @staticmethod
    def catalog_unreadable(path: Path, reason: str) -> Diagnostic:
        """Catalog file could not be read.

        Args:
            path: The catalog file
            reason: OS error text

        Returns:
            Diagnostic for CATALOG_UNREADABLE
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_UNREADABLE,
            message=f"failed to load translation file {path} because {reason}",
            location=str(path),
        )

    @staticmethod
    def catalog_format_unknown(path: Path, supported: tuple[str, ...]) -> Diagnostic:
        """Catalog file extension maps to no decoder."""
        return Diagnostic(
            code=DiagnosticCode.CATALOG_FORMAT_UNKNOWN,
            message=f"failed to load translation file {path} because its extension is not recognized",
            hint=f"Catalog files must end in one of: {', '.join(supported)}",
            location=str(path),
        )

    @staticmethod
    def catalog_decode_failed(path: Path, reason: str) -> Diagnostic:
        """Catalog content is not valid JSON/YAML or has the wrong structure.

        Args:
            path: The catalog file
            reason: Decoder message

        Returns:
            Diagnostic for CATALOG_DECODE_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_DECODE_FAILED,
            message=f"failed to load translation file {path} because {reason}",
            hint="A catalog is a list of {id, translation} records or a mapping of id to translation",
            location=str(path),
        )

    @staticmethod
    def catalog_locale_unknown(path: Path) -> Diagnostic:
        """Neither the file name nor its directory names a locale."""
        return Diagnostic(
            code=DiagnosticCode.CATALOG_LOCALE_UNKNOWN,
            message=f"failed to load translation file {path} because it does not name a locale",
            hint="Name the file after its locale (fr.json, en-US.all.json) or place it in a locale directory",
            location=str(path),
        )

    @staticmethod
    def translation_invalid(reason: str) -> Diagnostic:
        """Single catalog record is malformed.

        Args:
            reason: What is wrong with the record

        Returns:
            Diagnostic for TRANSLATION_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_INVALID,
            message=reason,
        )

    @staticmethod
    def catalog_translation_invalid(path: Path, reason: str) -> Diagnostic:
        """Malformed record, attributed to its catalog file."""
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_INVALID,
            message=f"failed to load translation file {path} because {reason}",
            location=str(path),
        )

    # ------------------------------------------------------------------
    # Source scanning
    # ------------------------------------------------------------------

    @staticmethod
    def source_unreadable(path: Path, reason: str) -> Diagnostic:
        """Source file selected for sifting could not be read."""
        return Diagnostic(
            code=DiagnosticCode.SOURCE_UNREADABLE,
            message=f"failed to read source file {path} because {reason}",
            location=str(path),
        )

    @staticmethod
    def go_syntax(message: str, pos: int, line: int, column: int) -> Diagnostic:
        """Go lexer or parser failure at a position.

        Args:
            message: What the parser expected or found
            pos: Character offset of the failure
            line: Line number (1-indexed)
            column: Column number (1-indexed)

        Returns:
            Diagnostic for SOURCE_SYNTAX
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_SYNTAX,
            message=f"{line}:{column}: {message}",
            span=SourceSpan(start=pos, end=pos, line=line, column=column),
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, pos: int, line: int, column: int) -> Diagnostic:
        """Brackets nested deeper than the parser accepts."""
        return Diagnostic(
            code=DiagnosticCode.SOURCE_NESTING_DEPTH_EXCEEDED,
            message=f"{line}:{column}: brackets nested deeper than {max_depth} levels",
            span=SourceSpan(start=pos, end=pos, line=line, column=column),
            hint="Generated or malformed source; exclude it from the sift path",
        )

    @staticmethod
    def traversal_depth_exceeded(max_depth: int) -> Diagnostic:
        """AST traversal went deeper than the visitor accepts.

        Args:
            max_depth: The configured limit

        Returns:
            Diagnostic for SOURCE_TRAVERSAL_DEPTH_EXCEEDED
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TRAVERSAL_DEPTH_EXCEEDED,
            message=f"syntax tree deeper than {max_depth} nodes",
        )

    @staticmethod
    def source_syntax(path: Path, error: Diagnostic | str) -> Diagnostic:
        """Parser failure attributed to its source file.

        Args:
            path: The source file
            error: Parser diagnostic (or plain message)

        Returns:
            Diagnostic for SOURCE_SYNTAX carrying the parser's span
        """
        if isinstance(error, Diagnostic):
            return Diagnostic(
                code=error.code,
                message=f"{path}:{error.message}",
                span=error.span,
                hint=error.hint,
                location=str(path),
            )
        return Diagnostic(
            code=DiagnosticCode.SOURCE_SYNTAX,
            message=f"{path}: {error}",
            location=str(path),
        )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @staticmethod
    def marshal_failed(locale_id: str, format_name: str, reason: str) -> Diagnostic:
        """Serializer rejected a view."""
        return Diagnostic(
            code=DiagnosticCode.OUTPUT_MARSHAL_FAILED,
            message=f"failed to marshal {locale_id} strings to {format_name} because {reason}",
        )

    @staticmethod
    def write_failed(path: Path, reason: str) -> Diagnostic:
        """Output file could not be written.

        Args:
            path: The destination file
            reason: OS error text

        Returns:
            Diagnostic for OUTPUT_WRITE_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.OUTPUT_WRITE_FAILED,
            message=f"failed to write {path} because {reason}",
            hint="Check that the output directory exists and is writable",
            location=str(path),
        )

    # ------------------------------------------------------------------
    # Warnings
    # ------------------------------------------------------------------

    @staticmethod
    def alias_not_found(factory: tuple[str, str]) -> Diagnostic:
        """No assignment from the factory call was found while sifting."""
        package, function = factory
        return Diagnostic(
            code=DiagnosticCode.ALIAS_NOT_FOUND,
            message=f"no {package}.{function} alias found; no identifiers extracted",
            hint=f"Bind the translation function with e.g. T := {package}.{function}(\"en-US\")",
            severity="warning",
        )
