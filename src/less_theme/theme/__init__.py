from less_theme.theme.assembler import ThemeGenerator, generate_theme, rewrite_custom_properties
from less_theme.theme.cache import ThemeCache, fingerprint
from less_theme.theme.markers import build_probe, extract_marker_colors, marker_name

__all__ = [
    "ThemeGenerator",
    "generate_theme",
    "rewrite_custom_properties",
    "ThemeCache",
    "fingerprint",
    "build_probe",
    "extract_marker_colors",
    "marker_name",
]
