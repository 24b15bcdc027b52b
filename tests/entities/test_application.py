"""
Tests for the Application entity.
"""

import os

import pytest

from app_audit.entities.Application import Application


class TestApplication:
    def test_initialization(self, make_bundle):
        bundle = make_bundle("Cloudflare WARP.app")
        app = Application(bundle)

        assert app.path == os.path.abspath(bundle)
        assert app.name == "Cloudflare WARP.app"
        assert app.version is None

    def test_trailing_separator_is_ignored_for_the_name(self, make_bundle):
        bundle = make_bundle("Cloudflare WARP.app")
        app = Application(bundle + os.sep)

        assert app.name == "Cloudflare WARP.app"

    def test_empty_path_is_rejected(self):
        with pytest.raises(ValueError, match="'path' is required"):
            Application("")

    def test_info_plist_path(self):
        app = Application("/Applications/Foo.app")

        assert app.info_plist_path == "/Applications/Foo.app/Contents/Info.plist"

    def test_version_defaults_to_none(self):
        assert Application("/Applications/Foo.app", version="").version is None
        assert Application("/Applications/Foo.app", version="1.2.3").version == "1.2.3"
