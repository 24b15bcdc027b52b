"""
Tests for the LocateApplicationUseCase.
"""

import os
from unittest.mock import MagicMock

from app_audit.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from app_audit.exceptions import ApplicationSearchError
from app_audit.ports.files.application_search_port import ApplicationSearchPort
from app_audit.use_cases.application.locate_application import (
    LocateApplicationUseCase,
)

APP = "Cloudflare WARP.app"


class TestLocateApplicationUseCase:
    def test_located_bundle(self, applications_dir, make_bundle, mock_logger):
        bundle = make_bundle(f"Cloudflare/{APP}")
        use_case = LocateApplicationUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )

        app = use_case.execute(APP, applications_dir, 3)

        assert app is not None
        assert app.path == bundle
        assert app.name == APP

    def test_not_installed(self, applications_dir, mock_logger):
        use_case = LocateApplicationUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )

        assert use_case.execute(APP, applications_dir, 3) is None

    def test_bundle_below_max_depth_is_not_installed(
        self, applications_dir, make_bundle, mock_logger
    ):
        make_bundle(f"a/b/c/{APP}")
        use_case = LocateApplicationUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )

        assert use_case.execute(APP, applications_dir, 3) is None

    def test_similar_name_does_not_count(
        self, applications_dir, make_bundle, mock_logger
    ):
        loose = make_bundle("Cloudflare WARP2.app")
        search = MagicMock(spec=ApplicationSearchPort)
        # a loose name filter could hand back a near miss
        search.find.return_value = [loose]
        use_case = LocateApplicationUseCase(search, mock_logger)

        assert use_case.execute(APP, applications_dir, 3) is None
        search.find.assert_called_once_with(applications_dir, APP, 3)

    def test_wildcard_in_name_must_still_match_exactly(
        self, applications_dir, make_bundle, mock_logger
    ):
        make_bundle("Cloudflare WARP2.app")
        use_case = LocateApplicationUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )

        assert use_case.execute("Cloudflare WARP?.app", applications_dir, 3) is None

    def test_plain_file_is_not_a_bundle(self, applications_dir, mock_logger):
        with open(os.path.join(applications_dir, APP), "w") as f:
            f.write("not a bundle")
        use_case = LocateApplicationUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )

        assert use_case.execute(APP, applications_dir, 3) is None

    def test_search_failure_counts_as_not_installed(self, mock_logger):
        search = MagicMock(spec=ApplicationSearchPort)
        search.find.side_effect = ApplicationSearchError("Directory does not exist: /x")
        use_case = LocateApplicationUseCase(search, mock_logger)

        assert use_case.execute(APP, "/x", 3) is None
        mock_logger.warning.assert_called_once_with(
            "Application search failed: Directory does not exist: /x"
        )

    def test_duplicates_pick_the_shallowest(
        self, applications_dir, make_bundle, mock_logger
    ):
        make_bundle(f"Vendor/Nested/{APP}")
        shallow = make_bundle(f"Vendor/{APP}")
        use_case = LocateApplicationUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )

        app = use_case.execute(APP, applications_dir, 3)

        assert app is not None
        assert app.path == shallow
        mock_logger.warning.assert_called_once_with(
            f"Found 2 copies of {APP}, using {shallow}"
        )

    def test_invalid_candidates_are_skipped(
        self, applications_dir, make_bundle, mock_logger
    ):
        valid = make_bundle(f"Vendor/{APP}")
        search = MagicMock(spec=ApplicationSearchPort)
        search.find.return_value = [os.path.join(applications_dir, APP), valid]
        use_case = LocateApplicationUseCase(search, mock_logger)

        app = use_case.execute(APP, applications_dir, 3)

        assert app is not None
        assert app.path == valid
