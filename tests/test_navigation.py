"""Tests for screenroute.navigation: provider protocol and MemoryNavigation."""

from screenroute.navigation import MemoryNavigation, Navigation


class TestMemoryNavigation:
    def test_initial_location(self) -> None:
        assert MemoryNavigation().location == "/"
        assert MemoryNavigation("/users").location == "/users"

    def test_satisfies_protocol(self) -> None:
        assert isinstance(MemoryNavigation(), Navigation)

    def test_navigate_absolute(self) -> None:
        nav = MemoryNavigation()
        nav.navigate("/users/42", "/app")
        assert nav.location == "/users/42"
        assert nav.entries == ("/", "/users/42")

    def test_navigate_relative_joins_basepath(self) -> None:
        nav = MemoryNavigation("/settings")
        nav.navigate("profile", "/settings")
        assert nav.location == "/settings/profile"

    def test_replace(self) -> None:
        nav = MemoryNavigation("/a")
        nav.replace("/b")
        assert nav.entries == ("/b",)

    def test_back(self) -> None:
        nav = MemoryNavigation("/a")
        nav.navigate("/b")
        nav.back()
        assert nav.location == "/a"

    def test_back_on_first_entry_is_noop(self) -> None:
        nav = MemoryNavigation("/a")
        nav.back()
        assert nav.location == "/a"
        assert nav.entries == ("/a",)


class TestSubscribe:
    def test_listener_receives_locations(self) -> None:
        nav = MemoryNavigation("/a")
        seen: list[str] = []
        nav.subscribe(seen.append)

        nav.navigate("/b")
        nav.replace("/c")
        nav.back()

        assert seen == ["/b", "/c", "/a"]

    def test_unsubscribe(self) -> None:
        nav = MemoryNavigation()
        seen: list[str] = []
        unsubscribe = nav.subscribe(seen.append)
        unsubscribe()
        unsubscribe()

        nav.navigate("/x")
        assert seen == []

    def test_noop_back_does_not_notify(self) -> None:
        nav = MemoryNavigation()
        seen: list[str] = []
        nav.subscribe(seen.append)
        nav.back()
        assert seen == []
