"""Filtered projection of the parsed coverage model."""

from typing import Iterable, List

from .filters import AssemblyFilter, ClassFilter
from .models import Assembly


def build_filtered_view(
    assemblies: Iterable[Assembly],
    assembly_filter: AssemblyFilter,
    class_filter: ClassFilter,
) -> List[Assembly]:
    """Return fresh assemblies holding only the classes that pass both filters.

    Relative order of assemblies and of classes is kept.  Classes and files
    are shared with the parser's model, not copied; an included assembly with
    no surviving class is still part of the view.
    """
    view: List[Assembly] = []
    for assembly in assemblies:
        if not assembly_filter.is_assembly_included(assembly.name):
            continue
        filtered = Assembly(assembly.name)
        for coverage_class in assembly.classes:
            if class_filter.is_class_included(coverage_class.name):
                filtered.classes.append(coverage_class)
        view.append(filtered)
    return view


def count_classes(assemblies: Iterable[Assembly]) -> int:
    return sum(len(a.classes) for a in assemblies)
