"""Tests for C# member extraction."""

from member_sorter.csharp_extractor import CSharpMemberExtractor
from member_sorter.extract_members import extract_members
from member_sorter.find_class_body import find_class_body
from member_sorter.language_variant import CSHARP
from member_sorter.member import FIELD, METHOD, PROPERTY, Member


def _extract(code: str) -> list[Member]:
    body = find_class_body(code, CSHARP)
    assert body is not None
    return extract_members(
        code[body.body_start : body.body_end],
        CSHARP,
        class_name=body.name,
        offset=body.body_start,
    )


def test_fields_and_property() -> None:
    """Verify that initialized fields, plain fields and properties are told apart."""
    code = """
        public class Test {
            public Vector2 ZoomSpeed = new(0.1f, 0.1f);
            public Vector2 MinZoom = new(1.0f, 1.0f);
            private HubConnection _connection;
            public string PlayerId = Guid.NewGuid().ToString();
            public WorldPlayer Player { get; set; }
        }
    """
    members = _extract(code)

    fields = [m for m in members if m.kind == FIELD]
    properties = [m for m in members if m.kind == PROPERTY]
    names = ["ZoomSpeed", "MinZoom", "_connection", "PlayerId"]
    assert [f.name for f in fields] == names
    assert [p.name for p in properties] == ["Player"]
    assert fields[0].source_text == "public Vector2 ZoomSpeed = new(0.1f, 0.1f);"
    assert fields[2].visibility == "private"


def test_duplicates_keep_first_occurrence() -> None:
    """Verify that repeated names are dropped and the first declaration survives."""
    code = """
        public class Test {
            public WorldPlayer Player { get; set; }
            public Camera2D Camera { get; set; }
            public ParallaxLayer Background { get; set; }
            public Camera2D Camera { get; set; }  // Duplicate
            public WorldPlayer Player { get; set; }  // Duplicate

            public override void _Ready() {
                // Method body
            }

            public override void _Process(double delta) {
                // Method body
            }
        }
    """
    members = _extract(code)

    assert [m.name for m in members] == [
        "Player",
        "Camera",
        "Background",
        "_Ready",
        "_Process",
    ]
    assert [m.kind for m in members].count(PROPERTY) == 3  # noqa: PLR2004
    player = members[0]
    assert player.start == code.index("public WorldPlayer Player")


def test_duplicate_of_other_kind_is_dropped() -> None:
    """Verify that the first name wins even when a later duplicate has another kind."""
    code = """
        public class Test {
            public int Value { get; set; }
            private int Value;
        }
    """
    members = _extract(code)
    assert len(members) == 1
    assert members[0].kind == PROPERTY


def test_constructor_is_excluded() -> None:
    """Verify that methods named like the class are not listed."""
    code = """
        public class Test {
            private int _x;
            public Test(int x) {
                _x = x;
            }
            public Test Test() { return this; }
            public static Test Create() => new Test(1);
            public int GetX() { return _x; }
        }
    """
    names = [m.name for m in _extract(code)]
    assert "Test" not in names
    assert names == ["_x", "Create", "GetX"]


def test_expression_bodied_members() -> None:
    """Verify that `=> expr;` members are captured as one member each."""
    code = """
        public class Shape {
            public double Area => Width * Height;
            public override string ToString() => "Shape";
            public double Width { get; set; }
            public double Height { get; set; }
        }
    """
    members = _extract(code)
    kinds = {m.name: m.kind for m in members}
    assert kinds == {
        "Area": PROPERTY,
        "ToString": METHOD,
        "Width": PROPERTY,
        "Height": PROPERTY,
    }
    assert members[0].source_text == "public double Area => Width * Height;"
    assert members[1].source_text == 'public override string ToString() => "Shape";'


def test_nested_method_body_is_extended() -> None:
    """Verify that a method body with nested blocks is captured whole."""
    code = """
        public class Runner {
            public void Run() {
                if (ready) {
                    foreach (var item in items) {
                        Process(item);
                    }
                }
            }

            private bool ready;
        }
    """
    members = _extract(code)
    assert [m.name for m in members] == ["Run", "ready"]
    run = members[0]
    assert run.source_text.endswith("}\n            }")
    assert "Process(item);" in run.source_text
    assert run.source_text.count("{") == run.source_text.count("}")


def test_methods_braces_balanced() -> None:
    """Verify brace balance for every extracted method."""
    code = """
        public class Service {
            public async Task<string> LoadAsync(int id) {
                var result = await Fetch(id);
                return result ?? "";
            }
            private void Log(string msg) { Console.WriteLine(msg); }
            protected virtual void OnChanged() { if (Changed != null) { Changed(); } }
        }
    """
    methods = [m for m in _extract(code) if m.kind == METHOD]
    assert [m.name for m in methods] == ["LoadAsync", "Log", "OnChanged"]
    for method in methods:
        assert method.source_text.count("{") == method.source_text.count("}")


def test_complex_properties() -> None:
    """Verify accessor bodies, generic types and auto-property initializers."""
    code = """
        public class Test {
            public string Name {
                get => _name;
                set => _name = value;
            }
            private List<int> Numbers { get; set; } = new();
            protected Dictionary<string, object> Data { get; set; }
        }
    """
    members = _extract(code)
    assert [(m.name, m.kind) for m in members] == [
        ("Name", PROPERTY),
        ("Numbers", PROPERTY),
        ("Data", PROPERTY),
    ]
    assert members[0].visibility == "public"
    assert members[1].source_text == "private List<int> Numbers { get; set; } = new();"
    assert members[2].visibility == "protected"


def test_visibility_and_modifiers() -> None:
    """Verify that the leading access keyword is the visibility."""
    code = """
        public class Config {
            internal static readonly int Limit = 5;
            protected internal virtual void Hook() { }
        }
    """
    members = _extract(code)
    assert [(m.name, m.visibility) for m in members] == [
        ("Limit", "internal"),
        ("Hook", "protected"),
    ]


def test_unterminated_method_runs_to_end() -> None:
    """Verify that a method missing its closing brace does not raise."""
    body = "\n    public void Broken() { if (x) {\n"
    members = CSharpMemberExtractor("Host").extract(body)
    assert [m.name for m in members] == ["Broken"]
    assert members[0].source_text == body.strip()


def test_brace_in_string_literal_swallows_following_members() -> None:
    """Verify the known limitation: braces inside strings are counted."""
    body = '\n    public string Open() { return "{"; }\n    public int Count;\n'
    members = CSharpMemberExtractor("Host").extract(body)
    assert [m.name for m in members] == ["Open"]
    assert "public int Count;" in members[0].source_text


def test_offsets_are_document_based() -> None:
    """Verify that member spans point into the original document."""
    code = "public class A {\n    public int X;\n}\n"
    member = _extract(code)[0]
    assert code[member.start : member.end] == "public int X;"


def test_bodiless_methods_are_captured() -> None:
    """Verify that abstract, partial and extern declarations are kept as methods."""
    code = """
        public abstract partial class Native {
            public abstract double Area();
            public partial void OnChanged(int value);
            public static extern int Beep(int frequency, int duration);
            public int Sides;
        }
    """
    members = _extract(code)
    assert [(m.name, m.kind) for m in members] == [
        ("Area", METHOD),
        ("OnChanged", METHOD),
        ("Beep", METHOD),
        ("Sides", FIELD),
    ]
    assert members[0].source_text == "public abstract double Area();"
    assert members[1].source_text == "public partial void OnChanged(int value);"
