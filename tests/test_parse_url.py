"""Tests for registry specifier parsing."""

from docpages.parse_url import parse_url


def test_deno_land_x() -> None:
    """Verify package, version and module of a third party module."""
    parsed = parse_url("deno.land/x/oak@v10.0.0/mod.ts")
    assert parsed is not None
    assert parsed.registry == "deno.land/x"
    assert parsed.org is None
    assert parsed.package == "oak"
    assert parsed.version == "v10.0.0"
    assert parsed.module == "mod.ts"


def test_deno_land_x_with_scheme_and_no_version() -> None:
    """Verify that schemes are accepted and a missing version stays None."""
    parsed = parse_url("https://deno.land/x/oak/mod.ts")
    assert parsed is not None
    assert parsed.package == "oak"
    assert parsed.version is None


def test_http_scheme_is_accepted() -> None:
    """Verify that plain http URLs parse like their https form."""
    parsed = parse_url("http://deno.land/x/oak/mod.ts")
    assert parsed is not None
    assert parsed.registry == "deno.land/x"
    assert parsed.package == "oak"
    assert parsed.module == "mod.ts"


def test_std_has_no_package() -> None:
    """Verify that the std registry yields no package name."""
    parsed = parse_url("deno.land/std@0.120.0/http/server.ts")
    assert parsed is not None
    assert parsed.registry == "deno.land/std"
    assert parsed.package is None
    assert parsed.version == "0.120.0"
    assert parsed.module == "http/server.ts"


def test_scoped_npm_cdn() -> None:
    """Verify org scoped packages on npm-backed CDNs."""
    parsed = parse_url("esm.sh/@org/pkg@1.0.0/dist/index.js")
    assert parsed is not None
    assert parsed.registry == "esm.sh"
    assert parsed.org == "@org"
    assert parsed.package == "pkg"
    assert parsed.version == "1.0.0"
    assert parsed.module == "dist/index.js"

    bare = parse_url("esm.sh/react")
    assert bare is not None
    assert bare.package == "react"
    assert bare.org is None
    assert bare.module is None


def test_github_raw() -> None:
    """Verify that raw GitHub urls map org/package/ref/path."""
    parsed = parse_url("raw.githubusercontent.com/denoland/deno/main/cli/mod.ts")
    assert parsed is not None
    assert parsed.registry == "github.com"
    assert parsed.org == "denoland"
    assert parsed.package == "deno"
    assert parsed.version == "main"
    assert parsed.module == "cli/mod.ts"


def test_gist_ids_are_truncated() -> None:
    """Verify that gist ids and revisions are shortened for display."""
    parsed = parse_url(
        "gist.githubusercontent.com/user/0123456789abcdef/raw/fedcba9876543210/mod.ts"
    )
    assert parsed is not None
    assert parsed.package == "0123456"
    assert parsed.version == "fedcba9"


def test_unrecognized_specifiers() -> None:
    """Verify that library and malformed specifiers yield None."""
    assert parse_url("deno/stable") is None
    assert parse_url("not a url") is None
    assert parse_url("") is None
    assert parse_url("deno.land/stdx/mod.ts") is None
