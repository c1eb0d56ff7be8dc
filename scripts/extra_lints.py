#!/usr/bin/env python3
"""Custom linting rules for code quality.

Rules:
1. No class-based tests in test files (use module-level functions)
2. No imports inside functions in library code
3. No mutable default arguments
4. No print() statements in library code (use logging)
5. No TODO/FIXME comments without issue references
6. No draws from the global ``random`` or ``numpy.random`` state in library
   code; randomness must come from a RandomSource

Usage: python scripts/extra_lints.py [ROOT]
"""

import ast
import re
import sys
from dataclasses import dataclass
from pathlib import Path

# Constructors are allowed; anything else on these modules draws from
# interpreter-wide state.
ALLOWED_RANDOM_ATTRIBUTES = {
    "random": {"Random", "SystemRandom"},
    "numpy.random": {"default_rng", "Generator", "SeedSequence", "PCG64"},
}
MODULE_ALIASES = {"np": "numpy"}


@dataclass
class LintError:
    file: Path
    line: int
    column: int
    rule: str
    message: str

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}: {self.rule}: {self.message}"


def dotted_name(node: ast.expr) -> str | None:
    """Return ``a.b.c`` for a chain of attribute accesses on a name."""
    parts: list[str] = []
    while isinstance(node, ast.Attribute):
        parts.append(node.attr)
        node = node.value
    if not isinstance(node, ast.Name):
        return None
    parts.append(MODULE_ALIASES.get(node.id, node.id))
    return ".".join(reversed(parts))


class LintVisitor(ast.NodeVisitor):
    """AST visitor that checks for lint violations."""

    def __init__(self, file: Path, source: str) -> None:
        self.file = file
        self.source = source
        self.errors: list[LintError] = []
        self._is_test_file = file.name.startswith("test_") or file.name == "conftest.py"
        self._function_depth = 0

    def _add_error(self, node: ast.AST, rule: str, message: str) -> None:
        lineno = getattr(node, "lineno", 0)
        col_offset = getattr(node, "col_offset", 0)
        self.errors.append(LintError(self.file, lineno, col_offset, rule, message))

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        # Hypothesis stateful machines are exposed through Machine.TestCase,
        # so any class named Test* is a class-based test.
        if self._is_test_file and node.name.startswith("Test"):
            msg = f"Class-based test '{node.name}' found. Use functions."
            self._add_error(node, "no-class-tests", msg)
        self.generic_visit(node)

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        self._check_defaults(node)
        self._function_depth += 1
        self.generic_visit(node)
        self._function_depth -= 1

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> None:
        self._check_defaults(node)
        self._function_depth += 1
        self.generic_visit(node)
        self._function_depth -= 1

    def _check_defaults(self, node: ast.FunctionDef | ast.AsyncFunctionDef) -> None:
        for default in node.args.defaults + node.args.kw_defaults:
            if default is not None and self._is_mutable_default(default):
                msg = "Mutable default argument. Use None instead."
                self._add_error(default, "mutable-default", msg)

    def _is_mutable_default(self, node: ast.expr) -> bool:
        if isinstance(node, (ast.List, ast.Dict, ast.Set)):
            return True
        return (
            isinstance(node, ast.Call)
            and isinstance(node.func, ast.Name)
            and node.func.id in ("list", "dict", "set")
        )

    def _check_import_placement(self, node: ast.Import | ast.ImportFrom) -> None:
        if self._function_depth > 0 and not self._is_test_file:
            self._add_error(
                node,
                "import-in-function",
                "Import inside function. Move to module level.",
            )

    def visit_Import(self, node: ast.Import) -> None:
        self._check_import_placement(node)
        self.generic_visit(node)

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        self._check_import_placement(node)
        self.generic_visit(node)

    def visit_Call(self, node: ast.Call) -> None:
        if not self._is_test_file:
            self._check_print(node)
            self._check_global_random(node)
        self.generic_visit(node)

    def _check_print(self, node: ast.Call) -> None:
        if isinstance(node.func, ast.Name) and node.func.id == "print":
            self._add_error(
                node,
                "no-print",
                "Use logging instead of print() in library code.",
            )

    def _check_global_random(self, node: ast.Call) -> None:
        name = dotted_name(node.func)
        if name is None or "." not in name:
            return
        module, _, attribute = name.rpartition(".")
        allowed = ALLOWED_RANDOM_ATTRIBUTES.get(module)
        if allowed is not None and attribute not in allowed:
            self._add_error(
                node,
                "global-random",
                f"{name}() draws from global state. Use a RandomSource.",
            )


def check_todo_comments(file: Path, source: str) -> list[LintError]:
    """Check for TODO/FIXME without issue references."""
    errors: list[LintError] = []
    todo_pattern = re.compile(r"#\s*(TODO|FIXME)(?!:\s*\w+-\d+)", re.IGNORECASE)

    for i, line in enumerate(source.splitlines(), 1):
        match = todo_pattern.search(line)
        if match:
            msg = f"{match.group(1)} needs issue reference (e.g., TODO: PROJ-123)."
            errors.append(LintError(file, i, match.start(), "todo-needs-issue", msg))
    return errors


def lint_source(path: Path, source: str) -> list[LintError]:
    """Lint ``source`` as if it were the contents of ``path``."""
    try:
        tree = ast.parse(source)
    except SyntaxError as e:
        return [LintError(path, e.lineno or 0, e.offset or 0, "syntax-error", str(e))]
    visitor = LintVisitor(path, source)
    visitor.visit(tree)
    return visitor.errors + check_todo_comments(path, source)


def lint_file(path: Path) -> list[LintError]:
    """Lint a single file and return any errors."""
    return lint_source(path, path.read_text())


def lint_tree(root: Path) -> list[LintError]:
    """Lint every Python file under ``root/src`` and ``root/tests``."""
    errors: list[LintError] = []
    for directory in ["src", "tests"]:
        dir_path = root / directory
        if not dir_path.exists():
            continue
        for py_file in dir_path.rglob("*.py"):
            errors.extend(lint_file(py_file))
    return sorted(errors, key=lambda e: (str(e.file), e.line, e.column))


def main(argv: list[str]) -> int:
    root = Path(argv[1]) if len(argv) > 1 else Path()
    errors = lint_tree(root)

    if errors:
        for error in errors:
            print(error)
        print(f"\nFound {len(errors)} custom lint error(s)")
        return 1

    print("All custom lint checks passed!")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
