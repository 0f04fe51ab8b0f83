"""Tests for SVG output."""

from streak_grid.render import build_scene
from streak_grid.svg import ACTIVE_FILL, INACTIVE_FILL, scene_to_svg, write_svg


def test_svg_structure(example_records):
    scene = build_scene(example_records, "Reading", 250, 250)
    svg = scene_to_svg(scene)

    assert svg.startswith("<svg ")
    assert svg.rstrip().endswith("</svg>")
    assert 'viewBox="0 0 500 500"' in svg
    assert 'width="250" height="250"' in svg
    assert svg.count("<circle ") == 10
    assert svg.count("<line ") == 7
    assert svg.count(f'fill="{ACTIVE_FILL}"') == 7
    assert svg.count(f'fill="{INACTIVE_FILL}"') == 3


def test_svg_escapes_label(example_records):
    svg = scene_to_svg(build_scene(example_records, "Push-ups & <sit-ups>", 500, 500))

    assert "Push-ups &amp; &lt;sit-ups&gt;" in svg


def test_svg_custom_fill_and_size(example_records):
    scene = build_scene(example_records, "Reading", 500, 500)
    svg = scene_to_svg(scene, width=100, height=80, fill=lambda cell: "red")

    assert 'width="100" height="80"' in svg
    assert svg.count('fill="red"') == 10


def test_svg_is_deterministic(example_records):
    a = scene_to_svg(build_scene(example_records, "Reading", 333, 333))
    b = scene_to_svg(build_scene(example_records, "Reading", 333, 333))

    assert a == b


def test_write_svg(tmp_path, example_records):
    out = tmp_path / "grid.svg"
    scene = build_scene(example_records, "Reading", 500, 500)

    write_svg(scene, out)

    assert out.read_text(encoding="utf-8") == scene_to_svg(scene)


def test_svg_text_anchors(example_records):
    svg = scene_to_svg(build_scene(example_records, "Reading", 500, 500))

    assert svg.count('text-anchor="start"') == 1
    # Title, seven day labels and ten dot values.
    assert svg.count('text-anchor="middle"') == 18
