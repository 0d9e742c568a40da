"""Pattern tables driving classification, noise filtering and budgeting.

All path patterns use search semantics (``re.Pattern.search``) against the
repository-relative path.
"""

import re

from diff_note.core.domain.diff.value_objects.file_category import FileCategory


def _compile(*patterns: str, flags: int = 0) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p, flags) for p in patterns)


# ── Category patterns ────────────────────────────────────────────────

_BACKEND_PATTERNS = _compile(
    r"^(api|server|backend)/",
    r"/api/",
    r"/(routes|controllers|handlers|endpoints)/",
    r"/(services|service|lib)/",
    r"\.service\.[jt]sx?$",
    r"\.controller\.[jt]sx?$",
    r"\.handler\.[jt]sx?$",
    r"/(models|entities|schemas|db|database|prisma|drizzle)/",
    r"\.model\.[jt]sx?$",
    r"\.entity\.[jt]sx?$",
    r"/(migrations|seeds)/",
    r"/middleware/",
    r"\.middleware\.[jt]sx?$",
)

_FRONTEND_PATTERNS = _compile(
    r"^(src/)?components/",
    r"^(src/)?pages/",
    r"^(app|src/app)/",
    r"\.component\.[jt]sx?$",
    r"\.page\.[jt]sx?$",
    r"/(hooks|contexts|providers)/",
    r"\.hook\.[jt]sx?$",
    r"use[A-Z][^/]*\.[jt]sx?$",
    r"^(src/)?styles?/",
    r"\.module\.(css|scss|sass)$",
    r"\.styled\.[jt]sx?$",
    r"/(store|stores|redux|zustand|recoil)/",
    r"\.slice\.[jt]sx?$",
    r"\.store\.[jt]sx?$",
)

_INFRA_PATTERNS = _compile(
    r"^Dockerfile",
    r"^docker-compose",
    r"\.docker$",
    r"^\.docker/",
    r"^\.github/(workflows|actions)/",
    r"^\.gitlab-ci",
    r"^\.circleci/",
    r"^Jenkinsfile",
    r"^\.travis\.yml$",
    r"^azure-pipelines",
    r"^bitbucket-pipelines",
    r"^(terraform|tf)/",
    r"\.tf$",
    r"^pulumi/",
    r"^cdk/",
    r"^(k8s|kubernetes|helm|charts)/",
    r"^serverless\.",
    r"^vercel\.json$",
    r"^netlify\.toml$",
)

_CONFIG_PATTERNS = _compile(
    r"^package\.json$",
    r"^tsconfig",
    r"^jsconfig",
    r"\.(config|rc)\.[jt]sx?$",
    r"^vite\.config",
    r"^webpack\.config",
    r"^rollup\.config",
    r"^esbuild",
    r"^babel\.config",
    r"^\.babelrc",
    r"^\.eslint",
    r"^\.prettier",
    r"^\.stylelint",
    r"^\.editorconfig$",
    r"^\.env",
    r"^\.nvmrc$",
    r"^\.node-version$",
    r"^\.tool-versions$",
)

_TEST_PATTERNS = _compile(
    r"\.test\.[jt]sx?$",
    r"\.spec\.[jt]sx?$",
    r"\.e2e\.[jt]sx?$",
    r"^(test|tests|__tests__|spec|specs)/",
    r"/(test|tests|__tests__|spec|specs)/",
    r"^cypress/",
    r"^playwright/",
    r"\.stories\.[jt]sx?$",
    r"^\.storybook/",
    r"jest\.config",
    r"vitest\.config",
)

_DOCS_PATTERNS = (
    *_compile(r"\.md$", r"\.mdx$", r"\.txt$", r"^docs?/", r"\.rst$"),
    *_compile(
        r"^README",
        r"^CHANGELOG",
        r"^CONTRIBUTING",
        r"^LICENSE",
        r"^SECURITY",
        r"^CODE_OF_CONDUCT",
        flags=re.IGNORECASE,
    ),
)

# First match wins; the order is part of the classification contract.
CATEGORY_PATTERN_TABLE: tuple[tuple[FileCategory, tuple[re.Pattern[str], ...]], ...] = (
    (FileCategory.BACKEND, _BACKEND_PATTERNS),
    (FileCategory.FRONTEND, _FRONTEND_PATTERNS),
    (FileCategory.INFRA, _INFRA_PATTERNS),
    (FileCategory.TEST, _TEST_PATTERNS),
    (FileCategory.CONFIG, _CONFIG_PATTERNS),
    (FileCategory.DOCS, _DOCS_PATTERNS),
)

SOURCE_FILE_RE = re.compile(r"\.([jt]sx?|py|go|rb|java|kt|rs|php|cs)$")
FRONTEND_HINTS: tuple[str, ...] = ("component", "page")

# ── Noise filters ────────────────────────────────────────────────────

SKIP_PATTERNS = (
    # lock files
    *_compile(
        r"package-lock\.json$",
        r"yarn\.lock$",
        r"pnpm-lock\.yaml$",
        r"Gemfile\.lock$",
        r"Cargo\.lock$",
        r"poetry\.lock$",
        r"composer\.lock$",
        r"go\.sum$",
        r"Pipfile\.lock$",
    ),
    # generated sources
    *_compile(
        r"\.generated\.[jt]sx?$",
        r"\.g\.[jt]sx?$",
        r"\.gen\.[jt]sx?$",
        r"\.auto\.[jt]sx?$",
        r"/generated/",
        r"/__generated__/",
    ),
    # build artifacts
    *_compile(
        r"\.min\.[jt]sx?$",
        r"\.min\.css$",
        r"\.bundle\.[jt]sx?$",
        r"\.chunk\.[jt]sx?$",
        r"\.map$",
        r"^dist/",
        r"^build/",
        r"^out/",
        r"^\.next/",
        r"^\.nuxt/",
    ),
    # generated API clients
    *_compile(
        r"/swagger/",
        r"/openapi/",
        r"\.swagger\.[jt]sx?$",
        r"\.openapi\.[jt]sx?$",
        r"/graphql/generated/",
        r"__generated__/graphql",
    ),
    # editor settings
    *_compile(r"\.idea/", r"\.vscode/settings\.json$", r"\.vscode/extensions\.json$"),
    # binaries and assets
    *_compile(
        r"\.(png|jpg|jpeg|gif|ico|svg|webp)$",
        r"\.(woff|woff2|ttf|eot)$",
        r"\.(mp3|mp4|wav|avi|mov)$",
        r"\.(pdf|zip|tar|gz)$",
        flags=re.IGNORECASE,
    ),
    # vendored code
    *_compile(r"^vendor/", r"^node_modules/"),
)

FORMATTING_PATTERNS = _compile(
    r"^\s*$",
    r"^[+-]\s*;?\s*$",
    r"^[+-]\s*,?\s*$",
)

BRACKET_ONLY_RE = re.compile(r"^[{}\[\](),;]+$")

HUNK_HEADER_RE = re.compile(r"^@@\s+-\d+(?:,\d+)?\s+\+(\d+)")

GENERATED_PATH_RE = re.compile(r"\.(generated|g|gen|auto)\.[jt]sx?$")
GENERATED_MARKERS: tuple[str, ...] = ("auto-generated", "DO NOT EDIT", "@generated")

# ── Scoring hints ────────────────────────────────────────────────────

DOC_EXTENSION_RE = re.compile(r"\.(md|txt|rst)$")
CONFIG_PATH_RE = re.compile(r"config|\.env|\.ya?ml$")
DEPENDENCY_MANIFESTS: tuple[str, ...] = (
    "package.json",
    "requirements.txt",
    "pyproject.toml",
    "Pipfile",
    "go.mod",
    "Cargo.toml",
    "Gemfile",
    "composer.json",
    "pom.xml",
    "build.gradle",
)
FIX_KEYWORDS: tuple[str, ...] = ("fix", "bug", "error", "patch")
BREAKING_KEYWORDS: tuple[str, ...] = ("breaking", "deprecated", "removed", "migration required")

ADR_TRIGGER_PATTERNS = _compile(
    r"config",
    r"schema",
    r"migration",
    r"docker",
    r"infrastructure",
    r"auth",
    r"security",
    flags=re.IGNORECASE,
) + _compile(r"\.prisma$", r"\.ya?ml$", r"\.tf$")

# ── Review skip ──────────────────────────────────────────────────────

# Path-only checks, independent of classification order.
REVIEW_DOC_PATTERNS = _compile(r"\.md$", r"\.txt$", r"^docs/") + _compile(
    r"^README", r"^CHANGELOG", r"^LICENSE", flags=re.IGNORECASE
)
REVIEW_TEST_PATTERNS = _compile(
    r"\.test\.[jt]sx?$",
    r"\.spec\.[jt]sx?$",
    r"^test/",
    r"^tests/",
    r"__tests__/",
)

# ── Budgets ──────────────────────────────────────────────────────────

CATEGORY_PRIORITY: dict[FileCategory, int] = {
    FileCategory.BACKEND: 100,
    FileCategory.FRONTEND: 80,
    FileCategory.CONFIG: 60,
    FileCategory.INFRA: 50,
    FileCategory.OTHER: 40,
    FileCategory.DOCS: 30,
    FileCategory.TEST: 20,
}

CATEGORY_TOKEN_BUDGET: dict[FileCategory, int] = {
    FileCategory.BACKEND: 1000,
    FileCategory.FRONTEND: 800,
    FileCategory.CONFIG: 300,
    FileCategory.INFRA: 300,
    FileCategory.DOCS: 200,
    FileCategory.TEST: 200,
    FileCategory.OTHER: 200,
}

CATEGORY_LINE_LIMITS: dict[FileCategory, int] = {
    FileCategory.BACKEND: 30,
    FileCategory.FRONTEND: 25,
    FileCategory.INFRA: 20,
    FileCategory.CONFIG: 15,
    FileCategory.OTHER: 15,
    FileCategory.DOCS: 10,
    FileCategory.TEST: 10,
}

CATEGORY_LABELS: dict[FileCategory, str] = {
    FileCategory.BACKEND: "Backend",
    FileCategory.FRONTEND: "Frontend",
    FileCategory.INFRA: "Infrastructure",
    FileCategory.CONFIG: "Configuration",
    FileCategory.TEST: "Tests",
    FileCategory.DOCS: "Documentation",
    FileCategory.OTHER: "Other",
}


def categories_by_priority() -> list[FileCategory]:
    """Categories sorted by descending priority."""
    return sorted(FileCategory, key=lambda c: CATEGORY_PRIORITY[c], reverse=True)
