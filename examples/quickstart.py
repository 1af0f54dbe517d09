"""Quickstart example for fontshorthand.

This example demonstrates parsing CSS font shorthand values into their
longhand properties, inspecting failures and writing values back out.

Note: Errors are returned as values. parse_font() never raises.
"""

from fontshorthand import ShorthandParser, is_valid_font, parse_font, serialize_font
from fontshorthand.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Full shorthand
print("=" * 50)
print("Example 1: Full Shorthand")
print("=" * 50)

font, errors = parse_font("italic small-caps bold 12px/30px Georgia, serif")
if is_valid_font(font):
    print(font.to_dict())
# Output: {'font-family': ['Georgia', 'serif'], 'font-size': '12px',
#          'font-style': 'italic', 'font-variant': 'small-caps',
#          'font-weight': 'bold', 'line-height': '30px'}

# Example 2: Quoted families and oblique angles
print("\n" + "=" * 50)
print("Example 2: Quoted Families and Oblique Angles")
print("=" * 50)

font, _ = parse_font('oblique 14deg 1.2em "Fira Sans", "Helvetica Neue", sans-serif')
if is_valid_font(font):
    print(font.style)
    print(font.family)
# Output: oblique 14deg
# Output: ('"Fira Sans"', '"Helvetica Neue"', 'sans-serif')

# Example 3: Rejected values
print("\n" + "=" * 50)
print("Example 3: Rejected Values")
print("=" * 50)

formatter = DiagnosticFormatter(output_format=OutputFormat.RUST)
for value in ('12px "Comic', '12px "Lucida" Grande', "bold serif"):
    font, errors = parse_font(value)
    for error in errors:
        if error.diagnostic is not None:
            print(formatter.format(error.diagnostic))
            print()

# Example 4: Normalizing a declaration
print("=" * 50)
print("Example 4: Normalizing")
print("=" * 50)

font, _ = parse_font("fancy   700  condensed 12px  Lucida    Grande ,serif")
if is_valid_font(font):
    print(serialize_font(font))
# Output: 700 condensed 12px Lucida Grande, serif

# Example 5: Custom input limit
print("\n" + "=" * 50)
print("Example 5: Custom Input Limit")
print("=" * 50)

parser = ShorthandParser(max_source_size=16)
font, errors = parse_font("12px Arial, Helvetica, sans-serif", parser=parser)
print(errors[0])
# Output: Font shorthand size (33 characters) exceeds maximum (16 characters)
