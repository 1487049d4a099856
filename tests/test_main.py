"""Command-line parsing and variant selection."""

import pytest

pytest.importorskip("pygame")
pytest.importorskip("OpenGL.GL")

from main import banner_config, build_parser  # noqa: E402


def test_defaults_to_combined_page_with_shutter():
    args = build_parser().parse_args([])
    assert args.demo == "combined"
    assert args.variant is None
    assert args.seed is None
    assert banner_config(args).name == "shutter"


def test_lone_banner_defaults_to_classic():
    args = build_parser().parse_args(["banner"])
    assert banner_config(args).name == "classic"


def test_explicit_variant_and_seed():
    args = build_parser().parse_args(["banner", "--variant", "wide", "--seed", "7"])
    config = banner_config(args)
    assert (config.width, config.height) == (1600, 150)
    assert args.seed == 7


@pytest.mark.parametrize("argv", [["--variant", "huge"], ["arcade"], ["--seed", "x"]])
def test_bad_arguments_rejected(argv):
    with pytest.raises(SystemExit):
        build_parser().parse_args(argv)
