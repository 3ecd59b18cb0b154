import pytest

from parcsbarna.cli import add_session, delete_session, edit_session, main, run_menu
from parcsbarna.models import Location, PlayObject
from parcsbarna.park import Park
from parcsbarna.registry import ParkRegistry


def _scripted(answers):
    it = iter(answers)

    def ask(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return ask


def _registry():
    parks = [
        Park(
            location=Location(aj_id=1, street_name="Major", longitude="2.17", latitude="41.38"),
            objects=[
                PlayObject(aj_id=1, aj_m2=10.0, code="A1", kind="Gronxador"),
                PlayObject(aj_id=1, aj_m2=10.0, code="A2", kind="Tobogan"),
            ],
        ),
        Park(
            location=Location(aj_id=2, street_name="Nou"),
            objects=[PlayObject(aj_id=2, code="B1"), PlayObject(aj_id=2, code="B2")],
        ),
    ]
    return ParkRegistry(parks)


OBJECT_FIELDS = ["77", "20.5", "3", "3-12", "NEW", "Sorral"]


def _location_fields(aj_id, street="Diagonal"):
    return [str(aj_id), "Eixample", "2", "Dreta", "7", street, "300", "Av", "12", "2.1", "41.4"]


def test_edit_object_replaces_and_keeps_park_id():
    registry = _registry()
    out = []
    ask = _scripted(["1", "2", "1", *OBJECT_FIELDS, "1", "3"])
    edit_session(registry, ask, out.append)
    obj = registry.get(1).objects[0]
    assert obj.code == "NEW"
    assert obj.aj_id == 1
    assert obj.aj_m2 == 20.5
    assert len(registry.get(1)) == 2


def test_edit_location_keeps_park_id():
    registry = _registry()
    ask = _scripted(["2", "1", *_location_fields(55), "2"])
    edit_session(registry, ask, [].append)
    park = registry.get(2)
    assert park.location.street_name == "Diagonal"
    assert park.location.aj_id == 2
    assert 55 not in registry


def test_edit_object_out_of_range_leaves_park_unchanged():
    registry = _registry()
    ask = _scripted(["1", "2", "9"])
    edit_session(registry, ask, [].append)
    assert [o.code for o in registry.get(1).objects] == ["A1", "A2"]


def test_edit_unknown_id_asks_again():
    registry = _registry()
    out = []
    ask = _scripted(["99", "1", "2", "1", *OBJECT_FIELDS, "1", "3"])
    edit_session(registry, ask, out.append)
    assert any("no existeix" in line for line in out)
    assert 99 not in registry
    assert [o.code for o in registry.get(1).objects] == ["NEW", "A2"]
    assert registry.get(1).objects[0].aj_id == 1


def test_add_new_park_with_object():
    registry = _registry()
    ask = _scripted(["1", *_location_fields(5), "1", *OBJECT_FIELDS, "2", "3"])
    add_session(registry, ask, [].append)
    assert [p.aj_id for p in registry] == [1, 2, 5]
    park = registry.get(5)
    assert [o.aj_id for o in park.objects] == [5]
    assert park.objects[0].code == "NEW"


def test_add_new_park_without_objects_warns():
    registry = _registry()
    out = []
    add_session(registry, _scripted(["1", *_location_fields(0), "2", "3"]), out.append)
    assert 0 in registry
    assert len(registry.get(0)) == 0
    assert any("cap objecte" in line for line in out)


def test_add_park_with_existing_id_is_refused():
    registry = _registry()
    add_session(registry, _scripted(["1", *_location_fields(2), "3"]), [].append)
    assert len(registry) == 2
    assert registry.get(2).location.street_name == "Nou"


def test_add_object_to_existing_park():
    registry = _registry()
    ask = _scripted(["2", "42", "1", "1", *OBJECT_FIELDS, "2", "3"])
    add_session(registry, ask, [].append)
    codes = [o.code for o in registry.get(1).objects]
    assert codes == ["A1", "A2", "NEW"]
    assert registry.get(1).objects[-1].aj_id == 1


def test_delete_park():
    registry = _registry()
    out = []
    delete_session(registry, _scripted(["1", "1", "99"]), out.append)
    assert [p.aj_id for p in registry] == [2]


def test_delete_object():
    registry = _registry()
    delete_session(registry, _scripted(["2", "2", "1", "2"]), [].append)
    assert [o.code for o in registry.get(2).objects] == ["B2"]


def test_delete_several_objects_then_leave():
    registry = _registry()
    delete_session(registry, _scripted(["1", "2", "2", "1", "1", "2"]), [].append)
    assert registry.get(1).objects == []


def test_run_menu_dispatches_and_stops_at_end_of_input():
    registry = _registry()
    run_menu(registry, _scripted(["c", "1", "1", "99"]), [].append)
    assert [p.aj_id for p in registry] == [2]


def test_run_menu_reports_bad_field_and_continues():
    registry = _registry()
    out = []
    ask = _scripted(["b", "1", "notanumber", "c", "2", "1"])
    run_menu(registry, ask, out.append)
    assert any("integer" in line for line in out)
    assert [p.aj_id for p in registry] == [1]


def test_main_loads_file_and_exits_on_end_of_input(tmp_path, monkeypatch, capsys):
    data = tmp_path / "DATA.txt"
    data.write_text(
        "header line\n"
        "OBJ1 1 Gronxador 12.5 2 3-12 100 Carrer Major 10 1 Ciutat 2 Gotic "
        "430000 4580000 2.17 41.38 5 Parc\n",
        encoding="utf-8",
    )

    def no_input(prompt=""):
        print(prompt, end="")
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main([str(data)]) == 0
    assert "SEARCH (a)" in capsys.readouterr().out


def test_main_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "error" in capsys.readouterr().err


@pytest.mark.parametrize("choice", ["x", ""])
def test_run_menu_ignores_unknown_choice(choice):
    registry = _registry()
    run_menu(registry, _scripted([choice]), [].append)
    assert len(registry) == 2