"""Message factories for every diagnostic the parser can emit.

Keeping the wording in one module lets tests assert on exact messages and
keeps hints and help links consistent.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Builds Diagnostic records for shorthand errors.

    Exception constructors never format messages themselves (ruff EM101/EM102);
    they receive a Diagnostic built here.
    """

    # MDN reference pages for the font properties
    _DOCS_BASE = "https://developer.mozilla.org/en-US/docs/Web/CSS"

    @staticmethod
    def unclosed_quote(quote: str, span: SourceSpan) -> Diagnostic:
        """Quoted family name never closed.

        Args:
            quote: The opening quote character
            span: Location from the opening quote to end of input

        Returns:
            Diagnostic for UNCLOSED_QUOTE
        """
        msg = f"Unclosed quote {quote} in font family starting at column {span.column}"
        return Diagnostic(
            code=DiagnosticCode.UNCLOSED_QUOTE,
            message=msg,
            span=span,
            hint=f"Close the family name with a matching {quote} (escape inner quotes as \\{quote})",
            help_url=f"{ErrorTemplate._DOCS_BASE}/font-family",
        )

    @staticmethod
    def trailing_family_text(text: str, span: SourceSpan) -> Diagnostic:
        """Quoted family name followed by text without a separating comma.

        Args:
            text: The text found after the closing quote
            span: Location of the trailing text

        Returns:
            Diagnostic for TRAILING_FAMILY_TEXT
        """
        msg = f"Unexpected text '{text.strip()}' after quoted font family"
        return Diagnostic(
            code=DiagnosticCode.TRAILING_FAMILY_TEXT,
            message=msg,
            span=span,
            hint="Separate family names with commas or move the text inside the quotes",
            help_url=f"{ErrorTemplate._DOCS_BASE}/font-family",
        )

    @staticmethod
    def invalid_shorthand(value: str, *, has_size: bool, has_family: bool) -> Diagnostic:
        """Shorthand lacks a font size or a font family.

        Args:
            value: The rejected shorthand value
            has_size: Whether a size token was recognized
            has_family: Whether at least one family name was recognized

        Returns:
            Diagnostic for INVALID_SHORTHAND
        """
        missing = [
            name
            for name, present in (("font-size", has_size), ("font-family", has_family))
            if not present
        ]
        msg = f"Cannot parse font shorthand '{value}'"
        hint = (
            f"Missing {' and '.join(missing)}; a font shorthand requires a size "
            "followed by at least one family name"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_SHORTHAND,
            message=msg,
            span=None,
            hint=hint,
            help_url=f"{ErrorTemplate._DOCS_BASE}/font",
        )

    @staticmethod
    def source_too_large(size: int, max_size: int) -> Diagnostic:
        """Shorthand value exceeds the configured size limit.

        Args:
            size: Length of the rejected value in characters
            max_size: Configured maximum length

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Font shorthand size ({size:,} characters) exceeds maximum ({max_size:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            span=None,
            hint="Configure max_source_size in ShorthandParser constructor to increase limit",
            help_url=f"{ErrorTemplate._DOCS_BASE}/font",
        )
