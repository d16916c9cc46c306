# File: tests/test_overrides.py
"""
Test profile override matching.

An override names a member by its centerline (start and end points) and
swaps in a profile from the catalog. These tests check:
- only the member with matching endpoints is affected
- matching is tolerant to round-off but not to reversed direction
- the first matching override wins
- an unknown profile name fails the run instead of falling back
"""

import pytest

from truss_bridge.catalog import ProfileNotFoundError, WideFlangeCatalog, WideFlangeProfileType
from truss_bridge.geometry import Line, Vector3
from truss_bridge.generative import (
    ProfileOverride,
    TrussBridgeParams,
    generate_truss_bridge,
    match_profile_with_override,
)
from truss_bridge.model import MemberRole


PATH = Line(Vector3(0.0, 0.0, 0.0), Vector3(9.0, 0.0, 0.0))
LEFT_GIRDER = Line(Vector3(0.0, 2.0, 0.0), Vector3(9.0, 2.0, 0.0))


def make_params(overrides, **kwargs):
    return TrussBridgeParams(path=PATH, width=4.0, height=3.0, overrides=overrides, **kwargs)


def profiles_by_name(model, role):
    return [(b.name, b.profile.name) for b in model.beams(role)]


def test_no_overrides_keeps_default():
    catalog = WideFlangeCatalog()
    default = catalog.get_profile_by_type(WideFlangeProfileType.W14x22)

    assert match_profile_with_override(LEFT_GIRDER, default, None, catalog) is default
    assert match_profile_with_override(LEFT_GIRDER, default, [], catalog) is default


def test_no_match_keeps_default():
    catalog = WideFlangeCatalog()
    default = catalog.get_profile_by_type(WideFlangeProfileType.W14x22)
    other = Line(Vector3(0, 0, 0), Vector3(1, 0, 0))
    overrides = [ProfileOverride(identity=other, profile_name="W24x76")]

    assert match_profile_with_override(LEFT_GIRDER, default, overrides, catalog) is default


def test_left_girder_override_only_affects_left_girder():
    """
    Override on the left girder's exact centerline: the left girder gets the
    new profile; the other girders and all frames/braces keep defaults.
    """
    out = generate_truss_bridge(make_params(
        [ProfileOverride(identity=LEFT_GIRDER, profile_name="W12x50")]))
    model = out.model

    girders = dict(profiles_by_name(model, MemberRole.GIRDER))
    assert girders == {
        "Right Girder": "W14x22",
        "Left Girder": "W12x50",
        "Upper Right Girder": "W14x22",
        "Upper Left Girder": "W14x22",
    }
    for role in (MemberRole.FRAME, MemberRole.BRACE):
        assert all(b.profile.name == "W8x48" for b in model.beams(role))

    print("✓ Left girder override is isolated")


def test_override_matches_within_tolerance():
    nudged = Line(Vector3(1e-7, 2.0 - 1e-7, 0.0), Vector3(9.0, 2.0, 1e-7))
    out = generate_truss_bridge(make_params(
        [ProfileOverride(identity=nudged, profile_name="W12x50")]))

    left = [b for b in out.model.beams(MemberRole.GIRDER) if b.name == "Left Girder"][0]
    assert left.profile.name == "W12x50"


def test_override_outside_tolerance_is_ignored():
    nudged = Line(Vector3(0.0, 2.01, 0.0), Vector3(9.0, 2.0, 0.0))
    out = generate_truss_bridge(make_params(
        [ProfileOverride(identity=nudged, profile_name="W12x50")]))

    assert all(b.profile.name == "W14x22" for b in out.model.beams(MemberRole.GIRDER))


def test_reversed_identity_does_not_match():
    reversed_left = Line(LEFT_GIRDER.end, LEFT_GIRDER.start)
    out = generate_truss_bridge(make_params(
        [ProfileOverride(identity=reversed_left, profile_name="W12x50")]))

    assert all(b.profile.name == "W14x22" for b in out.model.beams(MemberRole.GIRDER))


def test_first_match_wins():
    overrides = [
        ProfileOverride(identity=LEFT_GIRDER, profile_name="W12x50"),
        ProfileOverride(identity=LEFT_GIRDER, profile_name="W24x76"),
    ]
    out = generate_truss_bridge(make_params(overrides))
    left = [b for b in out.model.beams(MemberRole.GIRDER) if b.name == "Left Girder"][0]

    assert left.profile.name == "W12x50"


def test_frame_member_override():
    """
    The bottom edge of the first frame runs from the left corner to the
    right corner at x=0. Only that one frame member changes.
    """
    bottom_edge = Line(Vector3(0.0, 2.0, 0.0), Vector3(0.0, -2.0, 0.0))
    out = generate_truss_bridge(make_params(
        [ProfileOverride(identity=bottom_edge, profile_name="W6x15")]))

    changed = [b for b in out.model.beams(MemberRole.FRAME) if b.profile.name == "W6x15"]
    assert len(changed) == 1
    assert changed[0].curve.start.is_almost_equal_to(bottom_edge.start)


def test_unknown_profile_name_raises():
    """
    A matching override with a name the catalog does not know must fail
    the run, not silently keep the default.
    """
    with pytest.raises(ProfileNotFoundError, match="W99x1"):
        generate_truss_bridge(make_params(
            [ProfileOverride(identity=LEFT_GIRDER, profile_name="W99x1")]))


def test_unknown_name_on_unmatched_override_is_harmless():
    stray = Line(Vector3(100, 0, 0), Vector3(101, 0, 0))
    out = generate_truss_bridge(make_params(
        [ProfileOverride(identity=stray, profile_name="W99x1")]))
    assert len(out.model.beams(MemberRole.GIRDER)) == 4


def test_reduced_catalog_rejects_missing_override():
    catalog = WideFlangeCatalog([WideFlangeProfileType.W14x22, WideFlangeProfileType.W8x48])
    with pytest.raises(ProfileNotFoundError):
        generate_truss_bridge(
            make_params([ProfileOverride(identity=LEFT_GIRDER, profile_name="W12x50")]),
            catalog=catalog,
        )


# ============================================================================
# BRACE OVERRIDE KEYS
# ============================================================================

FIRST_RIGHT_BRACE = Line(Vector3(3.0, -2.0, 3.0), Vector3(0.0, -2.0, 0.0))
FIRST_LEFT_BRACE = Line(Vector3(3.0, 2.0, 3.0), Vector3(0.0, 2.0, 0.0))


def test_mirrored_braces_match_their_own_centerlines():
    out = generate_truss_bridge(make_params([
        ProfileOverride(identity=FIRST_RIGHT_BRACE, profile_name="W6x15"),
        ProfileOverride(identity=FIRST_LEFT_BRACE, profile_name="W10x33"),
    ]))
    braces = out.model.beams(MemberRole.BRACE)

    assert braces[0].name == "Right Brace" and braces[0].profile.name == "W6x15"
    assert braces[1].name == "Left Brace" and braces[1].profile.name == "W10x33"
    assert all(b.profile.name == "W8x48" for b in braces[2:])


def test_legacy_braces_share_the_right_brace_key():
    """
    In the legacy layout both braces of a bay are matched against the right
    brace's centerline; an override on the left-side line matches nothing.
    """
    out = generate_truss_bridge(make_params([
        ProfileOverride(identity=FIRST_RIGHT_BRACE, profile_name="W6x15"),
        ProfileOverride(identity=FIRST_LEFT_BRACE, profile_name="W10x33"),
    ], brace_layout='legacy'))
    braces = out.model.beams(MemberRole.BRACE)

    assert [b.profile.name for b in braces[:2]] == ["W6x15", "W6x15"]
    assert all(b.profile.name == "W8x48" for b in braces[2:])


if __name__ == "__main__":
    test_left_girder_override_only_affects_left_girder()
    test_first_match_wins()
    test_unknown_profile_name_raises()
    print("\n✅ All override tests passed!")
