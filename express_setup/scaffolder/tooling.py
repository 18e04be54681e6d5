"""Compiler, lint and formatter configuration for the generated project.

``tsconfig.json`` and ``.prettierrc`` are built as dictionaries; the ESLint
flat config is JavaScript and is rendered from a template chosen by
language.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..models import Answers, Language, ModuleSystem


@dataclass(frozen=True)
class CompilerModule:
    module: str
    module_resolution: str


COMPILER_MODULES: dict[ModuleSystem, CompilerModule] = {
    ModuleSystem.ESM: CompilerModule(module="ES2022", module_resolution="bundler"),
    ModuleSystem.COMMONJS: CompilerModule(module="commonjs", module_resolution="node"),
}

ESLINT_TEMPLATES: dict[Language, str] = {
    Language.TYPESCRIPT: "eslint/typescript.js.j2",
    Language.JAVASCRIPT: "eslint/javascript.js.j2",
}

PRETTIER_CONFIG: dict[str, Any] = {
    "semi": True,
    "trailingComma": "es5",
    "singleQuote": True,
    "printWidth": 100,
    "tabWidth": 2,
    "useTabs": False,
    "arrowParens": "always",
    "endOfLine": "lf",
}


def build_tsconfig(answers: Answers) -> dict[str, Any]:
    """Return the ``tsconfig.json`` document for a TypeScript project."""
    compiler = COMPILER_MODULES[answers.module_system]
    return {
        "compilerOptions": {
            "target": "ES2022",
            "module": compiler.module,
            "lib": ["ES2022"],
            "outDir": "dist",
            "rootDir": "src" if answers.use_src_directory else ".",
            "strict": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "forceConsistentCasingInFileNames": True,
            "resolveJsonModule": True,
            "moduleResolution": compiler.module_resolution,
            "declaration": True,
            "declarationMap": True,
            "sourceMap": True,
            "types": ["node"],
        },
        "include": ["src/**/*" if answers.use_src_directory else "**/*"],
        "exclude": ["node_modules", "dist"],
    }


def eslint_template(answers: Answers) -> str:
    return ESLINT_TEMPLATES[answers.language]


def eslint_context(answers: Answers) -> dict[str, Any]:
    return {"is_esm": answers.is_esm, "use_prettier": answers.use_prettier}


def build_prettier_config() -> dict[str, Any]:
    return dict(PRETTIER_CONFIG)
