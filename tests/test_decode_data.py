from rdap.decode_data import DecodeData


def _sample():
    return DecodeData(
        values={"handle": "AS1768", "port43": "whois.example.com", "custom": 5},
        known={"handle", "port43"},
        notes={"port43": ["invalid JSON type, expecting string"]},
    )


def test_value_returns_raw_value():
    data = _sample()
    assert data.value("handle") == "AS1768"
    assert data.value("custom") == 5


def test_value_missing_is_none():
    assert _sample().value("nope") is None


def test_fields_lists_all():
    assert sorted(_sample().fields()) == ["custom", "handle", "port43"]


def test_unknown_fields():
    assert _sample().unknown_fields() == ["custom"]


def test_notes_present_and_absent():
    data = _sample()
    assert data.notes("port43") == ["invalid JSON type, expecting string"]
    assert data.notes("handle") == []


def test_empty_decode_data():
    data = DecodeData()
    assert data.fields() == []
    assert data.unknown_fields() == []
    assert data.value("x") is None


def test_snapshot_is_independent_of_inputs():
    values = {"a": 1}
    notes = {"a": ["n1"]}
    data = DecodeData(values=values, known=["a"], notes=notes)
    values["b"] = 2
    notes["a"].append("n2")
    assert data.fields() == ["a"]
    assert data.notes("a") == ["n1"]


def test_returned_notes_cannot_mutate_snapshot():
    data = _sample()
    data.notes("port43").append("extra")
    assert len(data.notes("port43")) == 1


def test_str_lists_notes():
    text = str(_sample())
    assert "!!!port43: invalid JSON type, expecting string" in text
    assert text.startswith("[")