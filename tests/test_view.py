"""Tests for the filtered coverage model view."""

from reportgen.filters import AssemblyFilter, ClassFilter, PatternFilter
from reportgen.models import Assembly, CoverageClass
from reportgen.view import build_filtered_view, count_classes


class _CountingFilter(AssemblyFilter, ClassFilter):
    def __init__(self):
        self.calls = []

    def is_assembly_included(self, name):
        self.calls.append(("assembly", name))
        return True

    def is_class_included(self, name):
        self.calls.append(("class", name))
        return True


def _model():
    assemblies = []
    for name, classes in (("A1", ["X", "Y"]), ("A2", ["Z"]), ("A3", ["W", "V"])):
        a = Assembly(name)
        for c in classes:
            a.add_class(CoverageClass(c))
        assemblies.append(a)
    return assemblies


def _names(view):
    return [(a.name, [c.name for c in a.classes]) for a in view]


class TestBuildFilteredView:
    def test_class_included_iff_both_filters_pass(self):
        model = _model()
        view = build_filtered_view(model, PatternFilter(["-A2"]), PatternFilter(["-Y", "-V"]))
        assert _names(view) == [("A1", ["X"]), ("A3", ["W"])]

    def test_preserves_order(self):
        view = build_filtered_view(_model(), PatternFilter(), PatternFilter())
        assert _names(view) == [("A1", ["X", "Y"]), ("A2", ["Z"]), ("A3", ["W", "V"])]

    def test_assembly_without_surviving_classes_stays(self):
        view = build_filtered_view(_model(), PatternFilter(["+A2"]), PatternFilter(["-Z"]))
        assert _names(view) == [("A2", [])]
        assert count_classes(view) == 0

    def test_view_shares_classes_but_not_assemblies(self):
        model = _model()
        view = build_filtered_view(model, PatternFilter(), PatternFilter())
        assert view[0] is not model[0]
        assert view[0].classes[0] is model[0].classes[0]

    def test_does_not_touch_original_model(self):
        model = _model()
        build_filtered_view(model, PatternFilter(), PatternFilter(["-X"]))
        assert [c.name for c in model[0].classes] == ["X", "Y"]
        assert model[0].classes[0].assembly is model[0]

    def test_filters_called_once_per_entity(self):
        f = _CountingFilter()
        build_filtered_view(_model(), f, f)
        assert f.calls.count(("assembly", "A1")) == 1
        assert f.calls.count(("class", "X")) == 1
        assert len(f.calls) == 3 + 5

    def test_excluded_assembly_classes_not_consulted(self):
        f = _CountingFilter()
        build_filtered_view(_model(), PatternFilter(["-A1"]), f)
        assert ("class", "X") not in f.calls

    def test_count_classes(self):
        view = build_filtered_view(_model(), PatternFilter(), PatternFilter())
        assert count_classes(view) == 5
