from less_theme.compiler.base import Compiler
from less_theme.compiler.bundler import Bundler, bundle_file, bundle_source, resolve_npm_imports
from less_theme.compiler.errors import BundleError, CompilationError, CompilerNotFoundError
from less_theme.compiler.lessc import LesscCompiler, merge_options

__all__ = [
    "Compiler",
    "Bundler",
    "bundle_file",
    "bundle_source",
    "resolve_npm_imports",
    "BundleError",
    "CompilationError",
    "CompilerNotFoundError",
    "LesscCompiler",
    "merge_options",
]
