import json

from keuzekompas.client import AuthSession, ApiClient, FileStorage, MemoryStorage
from keuzekompas.client.forms import LoginForm, ModuleForm, RegisterForm
from keuzekompas.client.guard import auth_guard
from keuzekompas.client.storage import TOKEN_KEY, USER_KEY
from keuzekompas.features.modules.schemas import ModuleOut


def _valid_form(**overrides):
    data = dict(name="Robotics", module_id=5, studycredit=15, location="Breda", level="NLQF5")
    data.update(overrides)
    return ModuleForm(**data)


def test_module_form_valid():
    assert _valid_form().validate() is None


def test_module_form_reports_first_error():
    assert _valid_form(name=" ", location="").validate() == "Name is required"
    assert _valid_form(module_id=None).validate() == "Module ID is required"
    assert _valid_form(studycredit=0).validate() == "Study credits must be greater than 0"
    assert _valid_form(studycredit=None).validate() == "Study credits must be greater than 0"
    assert _valid_form(location="  ").validate() == "Location is required"
    assert _valid_form(level="").validate() == "Level is required"


def test_module_form_edit_mode_skips_id_check():
    module = ModuleOut(id=9, name="AI", studycredit=30, location="Tilburg", level="NLQF6")
    form = ModuleForm.from_module(module)
    assert form.editing is True
    form.module_id = None
    assert form.validate() is None
    payload = form.to_update_payload()
    assert "id" not in payload
    assert payload["studycredit"] == 30
    assert payload["shortdescription"] == ""


def test_module_form_create_payload():
    payload = _valid_form(name="  Robotics  ").to_create_payload()
    assert payload["id"] == 5
    assert payload["name"] == "Robotics"


def test_module_form_options():
    form = ModuleForm()
    assert form.credit_options == [15, 30]
    assert form.level_options == ["NLQF5", "NLQF6"]
    assert form.location_options == ["Breda", "Den Bosch", "Tilburg"]


def test_login_and_register_forms():
    assert LoginForm("", "x").validate() == "Please fill in all fields"
    assert LoginForm("a@example.com", "x").validate() is None
    assert RegisterForm("A", "a@example.com", "secret1", "secret2").validate() == "Passwords do not match"
    assert RegisterForm("A", "a@example.com", "abc", "abc").validate() == "Password must be at least 6 characters"
    assert RegisterForm("A", "a@example.com", "secret1", "secret1").validate() is None


def test_guard_redirects_anonymous_users():
    session = AuthSession(ApiClient(base_url="http://api.invalid", storage=MemoryStorage()))
    result = auth_guard(session, "/modules/3")
    assert result.allowed is False
    assert result.redirect == "/login?returnUrl=%2Fmodules%2F3"


def test_guard_allows_logged_in_users():
    storage = MemoryStorage({TOKEN_KEY: "token", USER_KEY: json.dumps(
        {"id": "1", "name": "A", "email": "a@example.com", "role": "user"}
    )})
    session = AuthSession(ApiClient(base_url="http://api.invalid", storage=storage))
    assert session.current_user.name == "A"
    assert auth_guard(session, "/modules") == (True, None)


def test_file_storage_round_trip(tmp_path):
    path = tmp_path / "nested" / "storage.json"
    storage = FileStorage(path)
    assert storage.get(TOKEN_KEY) is None
    storage.set(TOKEN_KEY, "abc")
    assert FileStorage(path).get(TOKEN_KEY) == "abc"
    storage.remove(TOKEN_KEY)
    assert storage.get(TOKEN_KEY) is None


def test_file_storage_ignores_corrupt_file(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{broken", encoding="utf-8")
    storage = FileStorage(path)
    assert storage.get(TOKEN_KEY) is None
    storage.set(TOKEN_KEY, "abc")
    assert json.loads(path.read_text(encoding="utf-8")) == {TOKEN_KEY: "abc"}
