import pytest

from rdap.errors import ClientError, ClientErrorType, rdap_server_error


def test_client_error_str_is_text():
    err = ClientError(ClientErrorType.INPUT_ERROR, "nil Request")
    assert str(err) == "nil Request"
    assert err.text == "nil Request"
    assert err.error_type is ClientErrorType.INPUT_ERROR


def test_client_error_can_be_raised_and_caught():
    err = ClientError(
        ClientErrorType.OBJECT_DOES_NOT_EXIST,
        "RDAP server returned 404, object does not exist.",
    )
    assert err.error_type is ClientErrorType.OBJECT_DOES_NOT_EXIST
    assert str(err) == "RDAP server returned 404, object does not exist."
    with pytest.raises(ClientError) as info:
        raise err
    assert info.value is err


def test_error_types_are_distinct():
    errors = [ClientError(t, t.name) for t in ClientErrorType]
    assert [e.error_type for e in errors] == list(ClientErrorType)
    assert [str(e) for e in errors] == [t.name for t in ClientErrorType]
    values = [e.error_type.value for e in errors]
    assert len(set(values)) == len(values)
    assert min(values) == 1


def test_rdap_server_error_text():
    err = rdap_server_error(404, "Not Found", ["object", "missing"])
    assert err.error_type is ClientErrorType.RDAP_SERVER_ERROR
    assert str(err) == (
        "Server returned error code 404, title='Not Found', "
        "description='object missing'"
    )


def test_rdap_server_error_empty_description():
    err = rdap_server_error(500, "Oops", [])
    assert str(err).endswith("description=''")
    assert "error code 500" in str(err)


def test_rdap_server_error_accepts_generator():
    err = rdap_server_error(400, "Bad", (word for word in ["a", "b", "c"]))
    assert "description='a b c'" in str(err)