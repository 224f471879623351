"""
Tests for dependency installation through an adapter.
"""

from redux_scaffold.adapters.mock import MockAdapter
from redux_scaffold.core.models.scaffold import PackageManagerChoice
from redux_scaffold.core.services.package_install import (
    INSTALL_ACTION_ID,
    install_packages,
)


class TestInstallPackages:
    def test_runs_manager_add_in_project_dir(self, config, mock_adapter: MockAdapter):
        choice = PackageManagerChoice(name="pnpm", source="flag")
        receipt = install_packages(config, choice, adapter=mock_adapter)

        assert receipt.ok
        ctx = mock_adapter.contexts[0]
        assert ctx.action.id == INSTALL_ACTION_ID
        assert ctx.action.params["argv"] == [
            "pnpm", "add", "redux", "react-redux", "@reduxjs/toolkit",
        ]
        assert ctx.project_root == str(config.project_dir)

    def test_npm_uses_install_save(self, config, mock_adapter: MockAdapter):
        choice = PackageManagerChoice(name="npm", source="default")
        install_packages(config, choice, adapter=mock_adapter)
        assert mock_adapter.contexts[0].action.params["argv"][:3] == [
            "npm", "install", "--save",
        ]

    def test_failure_is_returned_not_raised(self, config, mock_adapter: MockAdapter):
        mock_adapter.error = "Command exited with code 1"
        choice = PackageManagerChoice(name="yarn", source="lockfile")
        receipt = install_packages(config, choice, adapter=mock_adapter)
        assert receipt.failed
        assert "code 1" in receipt.error
