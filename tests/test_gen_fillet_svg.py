"""Tests for gen_fillet_svg.py preview generation."""
import pytest
from shared.types import Line
from fillet.core import FilletFailure
from gen_fillet_svg import sample_cases, run_case, sweep_radii, build_svg, main


@pytest.fixture(scope="module")
def cases():
    return sample_cases()


@pytest.fixture(scope="module")
def corner_sweep(cases):
    return sweep_radii(cases[0].path1, cases[0].path2, 1.0, 12.0, 12)


@pytest.fixture(scope="module")
def rendered(cases, corner_sweep):
    return build_svg(cases, (cases[0].path1, cases[0].path2), corner_sweep)


class TestSampleCases:
    def test_every_combination_present(self, cases):
        names = [c.name for c in cases]
        assert names == ["line / line", "line / convex arc", "line / concave arc",
                         "arc / arc", "collinear"]

    def test_only_collinear_fails(self, cases):
        results = [run_case(c)[0] for c in cases]
        assert [r.ok for r in results] == [True, True, True, True, False]
        assert results[-1].failure is FilletFailure.NO_GUIDE_INTERSECTION

    def test_run_case_leaves_case_untouched(self, cases):
        case = cases[0]
        result, p1, p2 = run_case(case)
        assert result.ok
        assert case.path1 == Line((0, 0), (10, 0))
        assert p1.end == pytest.approx((8, 0))


class TestSweepRadii:
    def test_radii_evenly_spaced(self, corner_sweep):
        assert [s.radius for s in corner_sweep] == pytest.approx(list(range(1, 13)))

    def test_failures_are_a_suffix(self, corner_sweep):
        oks = [s.result.ok for s in corner_sweep]
        first_fail = oks.index(False)
        assert all(oks[:first_fail])
        assert not any(oks[first_fail:])
        assert corner_sweep[first_fail].radius == pytest.approx(10)

    def test_failure_kinds(self, corner_sweep):
        assert corner_sweep[9].result.failure is FilletFailure.DEGENERATE_TRIM
        assert corner_sweep[10].result.failure is FilletFailure.NO_SHARD_INTERSECTION

    def test_each_radius_uses_fresh_paths(self, corner_sweep):
        # every success trims its own copies to the radius-dependent tangency
        for s in corner_sweep:
            if s.result.ok:
                assert s.path1.end == pytest.approx((10 - s.radius, 0))


class TestBuildSvg:
    def test_svg_envelope(self, rendered):
        svg, _ = rendered
        assert svg.strip().startswith("<svg")
        assert svg.strip().endswith("</svg>")
        assert "Fillet preview" in svg

    def test_one_result_per_case(self, rendered, cases):
        _, results = rendered
        assert len(results) == len(cases)

    def test_fillet_arcs_drawn(self, rendered):
        svg, _ = rendered
        assert svg.count('stroke="#d32f2f"') == 4

    def test_failure_captioned(self, rendered):
        svg, _ = rendered
        assert "collinear: r=1, NoGuideIntersection" in svg

    def test_sweep_caption(self, rendered):
        svg, _ = rendered
        assert "fails from r=10 (DegenerateTrim)" in svg


def test_main_writes_file(tmp_path, capsys):
    out = tmp_path / "preview.svg"
    main(["gen_fillet_svg.py", str(out)])
    assert out.read_text(encoding="utf-8").startswith("<svg")
    printed = capsys.readouterr().out
    assert f"SVG written to {out}" in printed
    assert "radius sweep: 9/12 radii filleted" in printed
