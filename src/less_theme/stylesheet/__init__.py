from less_theme.stylesheet.errors import StylesheetParseError
from less_theme.stylesheet.model import AtRule, Comment, Declaration, Rule, Stylesheet
from less_theme.stylesheet.parser import parse_stylesheet
from less_theme.stylesheet.reducer import RuleReducer, is_color_declaration, reduce_css

__all__ = [
    "parse_stylesheet",
    "reduce_css",
    "RuleReducer",
    "is_color_declaration",
    "Stylesheet",
    "Rule",
    "AtRule",
    "Declaration",
    "Comment",
    "StylesheetParseError",
]
