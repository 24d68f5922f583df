import pytest

from hanawire.tls import TLSConfigError, create_server_context


@pytest.mark.parametrize("cert_file", ["", None])
def test_missing_certificate_path(cert_file):
    with pytest.raises(TLSConfigError) as info:
        create_server_context(cert_file, "key.pem")
    assert str(info.value) == "No path was given for the certificate file for TLS"


@pytest.mark.parametrize("key_file", ["", None])
def test_missing_key_path(key_file):
    with pytest.raises(TLSConfigError) as info:
        create_server_context("cert.pem", key_file)
    assert str(info.value) == "No path was given for the key file for TLS"


def test_certificate_checked_before_key():
    with pytest.raises(TLSConfigError, match="certificate file"):
        create_server_context("", "")


def test_nonexistent_files(tmp_path):
    with pytest.raises(TLSConfigError) as info:
        create_server_context(tmp_path / "missing-cert.pem", tmp_path / "missing-key.pem")
    assert str(info.value).startswith(
        "Following error occured when loading the x509 key and cert files:"
    )
    assert isinstance(info.value.__cause__, OSError)


def test_invalid_file_contents(tmp_path):
    cert = tmp_path / "cert.pem"
    key = tmp_path / "key.pem"
    cert.write_text("not a certificate\n")
    key.write_text("not a key\n")
    with pytest.raises(TLSConfigError, match="loading the x509 key and cert files"):
        create_server_context(str(cert), str(key))


def test_error_is_value_error():
    with pytest.raises(ValueError):
        create_server_context("", "key.pem")