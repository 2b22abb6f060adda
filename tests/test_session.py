from trustbyte.client.session import SessionStorage, UserProfile


def test_save_and_load(tmp_path):
    storage = SessionStorage(tmp_path / "nested" / "user.json")
    profile = UserProfile(name="Jane", email="jane@x.com", token="abc")
    storage.save(profile)
    assert storage.load() == profile
    assert profile.bearer == "Bearer abc"


def test_load_when_logged_out(tmp_path):
    assert SessionStorage(tmp_path / "user.json").load() is None


def test_clear(tmp_path):
    storage = SessionStorage(tmp_path / "user.json")
    storage.save(UserProfile(name="Jane", email="jane@x.com", token="abc"))
    storage.clear()
    assert storage.load() is None
    storage.clear()  # already gone


def test_corrupt_file_is_ignored(tmp_path):
    path = tmp_path / "user.json"
    path.write_text("{not json", encoding="utf-8")
    assert SessionStorage(path).load() is None

    path.write_text('{"name": "Jane"}', encoding="utf-8")
    assert SessionStorage(path).load() is None
