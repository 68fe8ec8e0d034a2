"""Tests for clone-by-value."""

import pytest

from compositor.domain.part import CloneDepth, Prototype
from compositor.families.dark import DarkButton, DarkDrawable


class Sheet(Prototype):
    def __init__(self):
        self.rows = [[1, 2], [3]]


class TestCloneDepth:

    def test_parse(self):
        assert CloneDepth.parse("Deep") is CloneDepth.DEEP
        assert CloneDepth.parse(CloneDepth.SHALLOW) is CloneDepth.SHALLOW

    def test_parse_rejects_unknown_depth(self):
        with pytest.raises(ValueError, match="shallow"):
            CloneDepth.parse("medium")


class TestPrototype:

    def test_shallow_clone_shares_containers(self):
        sheet = Sheet()
        copy = sheet.clone(CloneDepth.SHALLOW)
        assert copy is not sheet
        assert copy.rows is sheet.rows

    def test_deep_clone_copies_containers(self):
        sheet = Sheet()
        copy = sheet.clone("deep")
        copy.rows[0].append(99)
        assert sheet.rows == [[1, 2], [3]]

    def test_depth_is_required(self):
        with pytest.raises(TypeError):
            Sheet().clone()

    def test_cloned_part_is_independent(self):
        button = DarkButton(label="ok", style={"color": "red"})
        button.apply()
        copy = button.clone(CloneDepth.DEEP)

        copy.apply()
        assert (button.presses, copy.presses) == (1, 2)
        assert copy.style == button.style
        assert copy.style is not button.style

    def test_cloned_drawable_keeps_behavior(self):
        drawable = DarkDrawable(shape="square", size=3)
        copy = drawable.clone(CloneDepth.SHALLOW)
        assert copy.renderer is drawable.renderer
        assert copy.draw() == drawable.draw() == "[dark] vector square side=3"
