import hashlib
import re

import pytest

from assetpack.core.types import AssetType
from conftest import BASE_MTIME

HEX32 = r"[a-f0-9]{32}"


def _md5(value):
    return hashlib.md5(str(value).encode("utf-8")).hexdigest()


def test_given_filespecs_matching_nothing_when_resolved_then_package_is_empty(options):
    package = options.js("none", "/js/none.js", ["/js/missing/*.js"])

    assert package.paths == []
    assert package.files == []
    assert package.mtime is None
    assert package.to_development_html("/") == ""
    assert package.to_production_html("/") == '<script src="/js/none.js"></script>'


def test_given_filespecs_without_mount_when_resolved_then_package_is_empty(options):
    package = options.css("other", "/other/x.css", ["/other/*.css"])

    assert package.paths == []


def test_given_ordered_filespecs_when_resolved_then_keeps_match_order_and_drops_ignored(options, asset_root):
    package = options.js("app", "/js/app.js", ["/js/vendor/*.js", "/js/*.js"])

    assert package.paths == ["/js/vendor/jquery.js", "/js/app.js", "/js/util.js"]
    assert package.files == [
        str(asset_root / "js" / "vendor" / "jquery.js"),
        str(asset_root / "js" / "app.js"),
        str(asset_root / "js" / "util.js"),
    ]


def test_given_overlapping_filespecs_when_resolved_then_first_match_wins(options):
    package = options.js("app", "/js/app.js", ["/js/util.js", "/js/**/*.js"])

    assert package.paths == ["/js/util.js", "/js/app.js", "/js/vendor/jquery.js"]


def test_given_files_when_mtime_then_returns_newest(options):
    package = options.js("app", "/js/app.js", ["/js/*.js"])

    assert package.mtime == BASE_MTIME + 20


def test_given_output_path_when_route_regex_then_matches_plain_and_busted_forms(options):
    package = options.js("app", "/js/app.js", ["/js/*.js"])
    regex = package.route_regex

    assert regex.match("/js/app.js")
    assert regex.match(f"/js/app.{'a' * 32}.js")
    assert regex.match(f"/js/app.{_md5(1)}.js")
    assert not regex.match("/js/app.min.js")
    assert not regex.match(f"/js/app.{'A' * 32}.js")
    assert not regex.match("/js/appXjs")
    assert not regex.match("/js/app.js.map")


def test_given_extensionless_path_when_route_regex_then_buster_is_optional_suffix(options):
    package = options.js("app", "/js/app", ["/js/*.js"])

    assert package.route_regex.match("/js/app")
    assert package.route_regex.match(f"/js/app.{'0' * 32}")


def test_given_js_package_when_development_html_then_one_busted_script_per_file(options):
    package = options.js("app", "/js/app.js", ["/js/vendor/*.js", "/js/*.js"])

    lines = package.to_development_html("/").split("\n")

    assert lines == [
        f'<script src="/js/vendor/jquery.{_md5(BASE_MTIME)}.js"></script>',
        f'<script src="/js/app.{_md5(BASE_MTIME + 10)}.js"></script>',
        f'<script src="/js/util.{_md5(BASE_MTIME + 20)}.js"></script>',
    ]


def test_given_js_package_when_production_html_then_single_tag_busted_by_newest_file(options):
    package = options.js("app", "/js/app.js", ["/js/*.js"])

    html = package.to_production_html("/")

    assert html == f'<script src="/js/app.{_md5(BASE_MTIME + 20)}.js"></script>'
    assert html.count("<script") == 1
    assert package.route_regex.match(package.production_path)


def test_given_css_package_when_rendered_then_uses_link_tags(options):
    package = options.css("screen", "/css/screen.css", ["/css/*.css"])

    dev = package.to_development_html("/")
    prod = package.to_production_html("/")

    assert dev.count('<link rel="stylesheet" href="/css/') == 2
    assert "<script" not in dev + prod
    assert re.fullmatch(rf'<link rel="stylesheet" href="/css/screen\.{HEX32}\.css" />', prod)


@pytest.mark.parametrize("asset_type", list(AssetType))
def test_given_any_type_when_predicates_then_exactly_one_holds(options, asset_type):
    register = getattr(options, asset_type.value)
    package = register("x", f"/{asset_type.value}/x.{asset_type.value}", [])

    assert package.is_js != package.is_css
    assert package.is_js == (asset_type is AssetType.js)


def test_given_path_prefix_when_rendered_then_prefix_is_prepended(options):
    package = options.js("app", "/js/app.js", ["/js/app.js"])

    html = package.to_development_html("/static/")

    assert html.startswith('<script src="/static/js/app.')


@pytest.mark.parametrize(
    ("prefix", "expected"),
    [("/", "/js/a.js"), ("", "/js/a.js"), (None, "/js/a.js"), ("/assets", "/assets/js/a.js"), ("/assets/", "/assets/js/a.js")],
)
def test_given_prefix_when_add_path_prefix_then_joins(options, prefix, expected):
    package = options.js("app", "/js/app.js", [])

    assert package.add_path_prefix("/js/a.js", prefix) == expected


def test_given_attrs_when_rendered_then_values_are_escaped(options):
    package = options.js("app", "/js/app.js", ["/js/missing.js"])

    html = package.to_production_html("/", {"data-x": 'a"<b>', "defer": "defer"})

    assert html == '<script src="/js/app.js" data-x="a&quot;&lt;b&gt;" defer="defer"></script>'


def test_given_asset_hosts_when_rendered_then_uri_uses_a_configured_host(options):
    options.asset_hosts = ["//cdn1.test", "//cdn2.test"]
    package = options.js("app", "/js/app.js", ["/js/*.js"])

    html = package.to_production_html("/")

    assert re.fullmatch(rf'<script src="//cdn[12]\.test/js/app\.{HEX32}\.js"></script>', html)
    assert package.to_production_html("/") == html


def test_given_environment_when_cache_key_then_development_includes_mtime(options):
    package = options.js("app", "/js/app.js", ["/js/*.js"])

    assert package.cache_key == f"app.js/{BASE_MTIME + 20}"
    options.development = False
    assert package.cache_key == "app.js"


def test_given_local_sources_when_combined_then_joins_contents_in_path_order(options):
    package = options.js("app", "/js/app.js", ["/js/app.js", "/js/util.js"])

    assert package.combined() == "var a = 1;\n\nvar b = 2;\n"


def test_given_js_package_when_minify_then_output_is_compressed(options):
    package = options.js("app", "/js/app.js", ["/js/app.js", "/js/util.js"])

    out = package.minify()

    assert "var a=1;" in out
    assert "var b=2;" in out
    assert len(out) < len(package.combined())


def test_given_css_package_when_minify_then_output_is_compressed(options):
    package = options.css("screen", "/css/screen.css", ["/css/main.css"])

    assert package.minify().strip() == "body{color:red}"


def test_given_empty_package_when_minify_then_returns_empty_text(options):
    package = options.js("none", "/js/none.js", ["/js/missing/*.js"])

    assert package.minify() == ""
