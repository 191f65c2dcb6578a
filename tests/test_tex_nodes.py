"""Rendering of the LaTeX document nodes."""

import pytest

from tex_nodes import Array, Document, File, Frame, Header, Math, Overline, Text, WithIndex


class TestLeaves:
    def test_text_renders_contents(self):
        assert Text("abc").render() == "abc"
        assert str(Text("abc")) == "abc"

    def test_overline_wraps_string(self):
        assert Overline("Z").render() == "\\overline{Z}"

    def test_overline_wraps_node(self):
        assert Overline(WithIndex("x", "4")).render() == "\\overline{x_{4}}"

    @pytest.mark.parametrize("value", ["ignoredText", "x", "", "y_{9}"])
    def test_with_index_ignores_value(self, value):
        assert WithIndex(value, "3").render() == "x_{3}"

    def test_with_index_keeps_value(self):
        assert WithIndex("y", "2").contents == "y"

    def test_overline_wraps_any_node(self):
        assert Overline(Header("foo", "bar")).render() == "\\overline{\\foo{bar}}"

    def test_equality_follows_rendering(self):
        assert WithIndex("x", "1") == WithIndex("x", "1")
        assert WithIndex("x", "1") != WithIndex("x", "2")
        assert Overline(WithIndex("x", "1")) != Overline(WithIndex("x", "2"))
        assert Overline("Z") == Overline(Text("Z"))

    def test_frames_with_different_output_differ(self):
        first, second = Math(), Math()
        first.append(Overline(WithIndex("x", "1")))
        second.append(Overline(WithIndex("x", "2")))
        assert first.render() != second.render()
        assert first != second


class TestHeader:
    def test_without_option(self):
        assert Header("foo", "bar").render() == "\\foo{bar}"

    def test_with_option(self):
        assert Header("foo", "opt", "bar").render() == "\\foo[opt]{bar}"

    def test_empty_option_is_omitted(self):
        assert Header("foo", "", "bar").render() == "\\foo{bar}"

    def test_equality(self):
        assert Header("foo", "bar") == Header("foo", "", "bar")
        assert Header("foo", "bar") != Header("foo", "opt", "bar")


class TestFrames:
    def test_empty_frame(self):
        frame = Frame("<", ">")
        assert frame.is_empty()
        assert frame.render() == "\n<>"

    def test_children_in_insertion_order(self):
        frame = Frame("<", ">")
        frame.append(Text("a"))
        frame.append(Text("b"))
        assert not frame.is_empty()
        assert frame.render() == "\n<a\nb\n>"

    @pytest.mark.parametrize(
        "cls, begin, end",
        [
            (Document, "\\begin{document}", "\\end{document}"),
            (Math, "\\begin{equation*}", "\\end{equation*}"),
            (Array, "\\begin{array}{cc}", "\\end{array}"),
            (File, "", ""),
        ],
    )
    def test_markers(self, cls, begin, end):
        frame = cls()
        assert frame.begin == begin
        assert frame.end == end
        assert frame.render() == "\n" + begin + end

    def test_nested_render(self):
        math = Math()
        math.append(Text("y"))
        doc = Document()
        doc.append(math)
        assert doc.render() == (
            "\n\\begin{document}\n\\begin{equation*}y\n\\end{equation*}\n\\end{document}"
        )


class TestArray:
    def test_first_child_has_no_separator(self):
        array = Array()
        array.append(Text("a"))
        assert [c.render() for c in array.children] == ["a"]

    def test_separator_between_rows(self):
        array = Array()
        for item in ("a", "b", "c"):
            array.append(Text(item))
        assert [c.render() for c in array.children] == ["a", "\\\\", "b", "\\\\", "c"]

    def test_children_are_flattened(self):
        inner = Math()
        inner.append(Text("q"))
        array = Array()
        array.append(inner)
        (child,) = array.children
        assert type(child) is Text
        assert child.contents == inner.render()
