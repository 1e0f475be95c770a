"""End-to-end context resolution per language."""

from __future__ import annotations

import pytest

from codecopy.context import ContextInfo, InMemoryDocument, Position, Selection
from codecopy.context.packs import CPP_PACK, PYTHON_PACK, RUST_PACK
from codecopy.context.strategy import ContextStrategy

RUST_SOURCE = """\
mod outer {
    mod inner {
        struct Point<T> {
            x: T,
        }

        impl<T, U> Container<T, U> {
            fn get(&self) -> u32 {
                let value = 1;
                value
            }
        }

        trait Shape {
            fn area(&self) -> f64;
        }
    }
}
"""


@pytest.fixture
def rust() -> ContextStrategy:
    return ContextStrategy(RUST_PACK)


@pytest.fixture
def python() -> ContextStrategy:
    return ContextStrategy(PYTHON_PACK)


@pytest.fixture
def cpp() -> ContextStrategy:
    return ContextStrategy(CPP_PACK)


class TestRust:
    """Rust resolution."""

    def test_method_in_generic_impl_inside_nested_modules(self, rust: ContextStrategy) -> None:
        # Given a position on `value` in `let value = 1;`
        doc = InMemoryDocument(RUST_SOURCE, file_name="/w/src/shapes.rs")

        # When
        info = rust.get_context(doc, Position(8, 20))

        # Then
        assert info.function_name == "Container::get"
        assert info.class_name == "Container"
        assert info.module_name == "outer::inner"
        assert info.extra == {"has_impl": "true", "has_type": "false", "mod_depth": "2"}

    def test_struct_field(self, rust: ContextStrategy) -> None:
        doc = InMemoryDocument(RUST_SOURCE, file_name="/w/src/shapes.rs")

        info = rust.get_context(doc, Position(3, 12))

        assert info.function_name is None
        assert info.class_name == "Point"
        assert info.module_name == "outer::inner"

    def test_trait_method_signature(self, rust: ContextStrategy) -> None:
        doc = InMemoryDocument(RUST_SOURCE, file_name="/w/src/shapes.rs")

        info = rust.get_context(doc, Position(14, 15))

        assert info.function_name == "Shape::area"
        assert info.class_name == "Shape"

    def test_innermost_nested_function(self, rust: ContextStrategy) -> None:
        source = "fn outer() {\n    fn inner() {\n        let x = 1;\n    }\n}\n"
        doc = InMemoryDocument(source, file_name="/w/src/lib.rs")

        info = rust.get_context(doc, Position(2, 12))

        assert info.function_name == "inner"
        assert info.class_name is None
        assert info.module_name is None  # crate root

    def test_second_method_of_type_wins(self, rust: ContextStrategy) -> None:
        source = (
            "impl Stack {\n"
            "    fn push(&mut self) {\n"
            "        let a = 1;\n"
            "    }\n"
            "    fn pop(&mut self) {\n"
            "        let items = || {\n"
            "            let b = 2;\n"
            "        };\n"
            "    }\n"
            "}\n"
        )
        doc = InMemoryDocument(source, file_name="/w/src/lib.rs")

        info = rust.get_context(doc, Position(6, 16))

        assert info.function_name == "Stack::pop"
        assert info.class_name == "Stack"

    def test_path_inference_only_without_module_declarations(self, rust: ContextStrategy) -> None:
        source = "mod m {\n    fn f() {\n        let a = 1;\n    }\n}\nfn top() {\n    let b = 2;\n}\n"
        doc = InMemoryDocument(source, file_name="/w/src/foo/bar.rs")

        inside = rust.get_context(doc, Position(2, 12))
        outside = rust.get_context(doc, Position(6, 8))

        assert inside.module_name == "m"
        assert outside.module_name == "foo::bar"
        assert outside.function_name == "top"

    def test_position_past_end_resolves_root(self, rust: ContextStrategy) -> None:
        doc = InMemoryDocument(RUST_SOURCE, file_name="/w/src/foo/mod.rs")

        info = rust.get_context(doc, Position(999, 0))

        assert info.function_name is None
        assert info.class_name is None
        assert info.module_name == "foo"

    def test_defaults_to_selection_start(self, rust: ContextStrategy) -> None:
        doc = InMemoryDocument(RUST_SOURCE, file_name="/w/src/shapes.rs")

        info = rust.get_context(doc, selection=Selection(Position(8, 16), Position(9, 21)))

        assert info.function_name == "Container::get"

    def test_revision_change_reparses(self, rust: ContextStrategy) -> None:
        doc = InMemoryDocument("fn first() {\n    let a = 1;\n}\n", file_name="/w/src/lib.rs", uri="mem://rev")
        assert rust.get_context(doc, Position(1, 8)).function_name == "first"

        doc.update("fn second() {\n    let a = 1;\n}\n")

        assert rust.get_context(doc, Position(1, 8)).function_name == "second"
        entry = rust.cache.peek("mem://rev")
        assert entry is not None
        assert entry.revision == doc.revision

    def test_syntax_errors_still_resolve(self, rust: ContextStrategy) -> None:
        source = "impl Broken {\n    fn half(&self) {\n        let x = 1\n    }\n}\n"
        doc = InMemoryDocument(source, file_name="/w/src/lib.rs")

        info = rust.get_context(doc, Position(1, 8))

        assert info.function_name == "Broken::half"

    def test_page_break_and_line_separator_keep_rows_aligned(self, rust: ContextStrategy) -> None:
        source = 'fn a() {\n    let s = "\u2028";\n}\n\x0c\nfn b() {\n    let z = "é";\n}\n'
        doc = InMemoryDocument(source, file_name="/w/src/lib.rs")

        info = rust.get_context(doc, Position(5, 14))

        assert info.function_name == "b"

    def test_fallback_is_path_only(self, rust: ContextStrategy) -> None:
        doc = InMemoryDocument(RUST_SOURCE, file_name="/w/src/a/b.rs")

        assert rust.fallback(doc) == ContextInfo(module_name="a::b")


class TestPython:
    """Python resolution uses '.' and classes as types."""

    SOURCE = """\
class Outer:
    class Inner:
        def method(self):
            return 1


def top():
    pass
"""

    def test_method_of_nested_class(self, python: ContextStrategy) -> None:
        doc = InMemoryDocument(self.SOURCE, file_name="/w/src/pkg/mod.py")

        info = python.get_context(doc, Position(3, 12))

        assert info.function_name == "Inner.method"
        assert info.class_name == "Inner"
        assert info.module_name == "pkg.mod"

    def test_top_level_function(self, python: ContextStrategy) -> None:
        doc = InMemoryDocument(self.SOURCE, file_name="/w/src/pkg/mod.py")

        info = python.get_context(doc, Position(7, 4))

        assert info.function_name == "top"
        assert info.class_name is None
        assert info.extra is not None
        assert info.extra["has_type"] == "false"


class TestCpp:
    """C++ resolution reads names through declarators."""

    SOURCE = """\
namespace app {
namespace detail {
class Widget {
public:
    int size() const {
        return 0;
    }
};
}
}

int Widget::resize(int n) {
    return n;
}

const char *Widget::label() const {
    return "w";
}
"""

    def test_inline_method_in_namespaced_class(self, cpp: ContextStrategy) -> None:
        doc = InMemoryDocument(self.SOURCE, file_name="/w/src/ui/widget.cpp")

        info = cpp.get_context(doc, Position(5, 8))

        assert info.function_name == "Widget::size"
        assert info.class_name == "Widget"
        assert info.module_name == "app::detail"

    def test_out_of_line_definition_not_requalified(self, cpp: ContextStrategy) -> None:
        doc = InMemoryDocument(self.SOURCE, file_name="/w/src/ui/widget.cpp")

        info = cpp.get_context(doc, Position(12, 4))

        assert info.function_name == "Widget::resize"
        assert info.class_name is None
        assert info.module_name == "ui::widget"

    def test_pointer_return_declarator(self, cpp: ContextStrategy) -> None:
        doc = InMemoryDocument(self.SOURCE, file_name="/w/src/ui/widget.cpp")

        info = cpp.get_context(doc, Position(16, 4))

        assert info.function_name == "Widget::label"
