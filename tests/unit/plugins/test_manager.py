"""
Tests for the PluginManager implementation.

This module provides test coverage for plugin management, including
plugin loading, registration, configuration, action execution and
provider context collection.
"""

import pytest
from unittest.mock import MagicMock, patch, AsyncMock

from solana_autotrader.plugins.manager import PluginManager
from solana_autotrader.interfaces.plugins.plugins import Plugin, Provider
from solana_autotrader.plugins.autotrader import AutotraderPlugin, get_plugin
from solana_autotrader.plugins.registry import ActionRegistry


@pytest.fixture
def mock_plugin():
    """Create a mock plugin."""
    plugin = MagicMock(spec=Plugin)
    plugin.name = "test_plugin"
    plugin.description = "Test plugin description"
    plugin.actions = []
    plugin.providers = []
    plugin.initialize = MagicMock()
    plugin.configure = MagicMock()
    return plugin


@pytest.fixture
def mock_action_registry():
    """Create a mock action registry with proper mock methods."""
    registry = MagicMock(spec=ActionRegistry)
    registry.get_action = MagicMock(return_value=None)
    registry.configure_all_actions = MagicMock()
    return registry


@pytest.fixture
def mock_action():
    """Create a mock action."""
    action = AsyncMock()
    action.name = "TEST_ACTION"
    action.validate.return_value = True
    action.execute.return_value = {"status": "success", "result": "test"}
    return action


@pytest.fixture
def config():
    """Sample configuration for testing."""
    return {"plugin_config": {"key": "value"}}


class TestPluginManager:
    """Test suite for PluginManager."""

    def test_init_default(self):
        """Test initialization with default values."""
        manager = PluginManager()
        assert isinstance(manager.action_registry, ActionRegistry)
        assert manager.config == {}
        assert manager._plugins == {}

    def test_init_with_config_and_registry(self, config, mock_action_registry):
        """Test initialization with config and registry."""
        manager = PluginManager(config=config, action_registry=mock_action_registry)
        assert manager.config == config
        assert manager.action_registry == mock_action_registry

    def test_register_plugin_success(self, mock_plugin, mock_action_registry):
        """Test successful plugin registration."""
        manager = PluginManager(action_registry=mock_action_registry)
        success = manager.register_plugin(mock_plugin)

        assert success is True
        assert manager._plugins[mock_plugin.name] == mock_plugin
        mock_plugin.initialize.assert_called_once_with(mock_action_registry)
        mock_plugin.configure.assert_called_once_with(manager.config)

    def test_register_plugin_failure_initialize(self, mock_plugin, mock_action_registry):
        """Test plugin registration failure during initialization."""
        mock_plugin.initialize.side_effect = Exception("Init failed")
        manager = PluginManager(action_registry=mock_action_registry)

        success = manager.register_plugin(mock_plugin)
        assert success is False
        assert mock_plugin.name not in manager._plugins

    def test_register_plugin_failure_configure(self, mock_plugin, mock_action_registry):
        """Test plugin registration failure during configuration."""
        mock_plugin.configure.side_effect = Exception("Config failed")
        manager = PluginManager(action_registry=mock_action_registry)

        success = manager.register_plugin(mock_plugin)
        assert success is False
        assert mock_plugin.name not in manager._plugins

    @patch("importlib.metadata.entry_points")
    def test_load_plugins_success(self, mock_entry_points, mock_plugin):
        """Test successful plugin loading from entry points."""
        mock_entry_point = MagicMock()
        mock_entry_point.name = "test_plugin"
        mock_entry_point.value = "test.plugin:factory"
        mock_entry_point.load.return_value = lambda: mock_plugin

        mock_entry_points.return_value = [mock_entry_point]

        manager = PluginManager()
        loaded = manager.load_plugins()

        assert loaded == ["test_plugin"]
        assert manager._plugins[mock_plugin.name] == mock_plugin
        mock_entry_points.assert_called_once_with(group="solana_autotrader.plugins")

    @patch("importlib.metadata.entry_points")
    def test_load_plugins_skip_duplicate(self, mock_entry_points, mock_plugin):
        """Test skipping already loaded plugins."""
        mock_entry_point = MagicMock()
        mock_entry_point.name = "test_plugin"
        mock_entry_point.value = "test.plugin:factory"
        mock_entry_point.load.return_value = lambda: mock_plugin

        mock_entry_points.return_value = [mock_entry_point]

        manager = PluginManager()
        manager.load_plugins()
        loaded = manager.load_plugins()

        assert loaded == []

    @patch("importlib.metadata.entry_points")
    def test_load_plugins_in_each_manager(self, mock_entry_points):
        """Test that every manager registers the entry point plugins itself."""
        mock_entry_point = MagicMock()
        mock_entry_point.name = "autotrader"
        mock_entry_point.value = "solana_autotrader.plugins.autotrader:get_plugin"
        mock_entry_point.load.return_value = get_plugin

        mock_entry_points.return_value = [mock_entry_point]

        first = PluginManager()
        second = PluginManager()

        assert first.load_plugins() == ["autotrader"]
        assert second.load_plugins() == ["autotrader"]
        assert second.action_registry.get_action("ANALYZE_TRADE") is not None
        assert second.get_plugin(AutotraderPlugin().name) is not None

    @pytest.mark.asyncio
    @patch("importlib.metadata.entry_points")
    async def test_execute_action_after_load_in_new_manager(self, mock_entry_points):
        """Test that a later manager can run the actions it loaded."""
        mock_entry_point = MagicMock()
        mock_entry_point.name = "autotrader"
        mock_entry_point.value = "solana_autotrader.plugins.autotrader:get_plugin"
        mock_entry_point.load.return_value = get_plugin

        mock_entry_points.return_value = [mock_entry_point]

        PluginManager().load_plugins()
        manager = PluginManager()
        manager.load_plugins()

        result = await manager.execute_action("ANALYZE_TRADE", token_address="abc")

        assert result["status"] == "error"
        assert "not found" not in result["message"]
        assert "not implemented" in result["message"]

    @patch("importlib.metadata.entry_points")
    def test_load_plugins_entry_point_error(self, mock_entry_points):
        """Test handling entry point loading errors."""
        mock_entry_point = MagicMock()
        mock_entry_point.name = "test_plugin"
        mock_entry_point.load.side_effect = Exception("Load failed")

        mock_entry_points.return_value = [mock_entry_point]

        manager = PluginManager()
        loaded = manager.load_plugins()

        assert loaded == []
        assert len(manager._plugins) == 0

    def test_get_plugin_existing(self, mock_plugin):
        """Test retrieving an existing plugin."""
        manager = PluginManager()
        manager._plugins[mock_plugin.name] = mock_plugin

        assert manager.get_plugin(mock_plugin.name) == mock_plugin

    def test_get_plugin_non_existing(self):
        """Test retrieving a non-existing plugin."""
        manager = PluginManager()
        assert manager.get_plugin("non_existing") is None

    def test_list_plugins(self, mock_plugin, mock_action):
        """Test listing registered plugins."""
        mock_plugin.actions = [mock_action]
        manager = PluginManager()
        manager._plugins[mock_plugin.name] = mock_plugin

        plugins = manager.list_plugins()
        assert len(plugins) == 1
        assert plugins[0]["name"] == mock_plugin.name
        assert plugins[0]["description"] == mock_plugin.description
        assert plugins[0]["actions"] == ["TEST_ACTION"]
        assert plugins[0]["providers"] == []

    @pytest.mark.asyncio
    async def test_execute_action_not_found(self):
        """Test executing a non-existing action."""
        manager = PluginManager()
        result = await manager.execute_action("non_existing")
        assert result["status"] == "error"
        assert "not found" in result["message"]

    @pytest.mark.asyncio
    async def test_execute_action_success(self, mock_action_registry, mock_action):
        """Test successful action execution."""
        mock_action_registry.get_action.return_value = mock_action

        manager = PluginManager(action_registry=mock_action_registry)
        result = await manager.execute_action("TEST_ACTION", param="value")

        assert result["status"] == "success"
        assert result["result"] == "test"
        mock_action.validate.assert_called_once_with(param="value")
        mock_action.execute.assert_called_once_with(param="value")

    @pytest.mark.asyncio
    async def test_execute_action_invalid_params(self, mock_action_registry, mock_action):
        """Test that actions are not executed when validation fails."""
        mock_action.validate.return_value = False
        mock_action_registry.get_action.return_value = mock_action

        manager = PluginManager(action_registry=mock_action_registry)
        result = await manager.execute_action("TEST_ACTION")

        assert result["status"] == "error"
        assert "Invalid parameters" in result["message"]
        mock_action.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_execute_action_error(self, mock_action_registry, mock_action):
        """Test action execution error handling."""
        mock_action.execute.side_effect = Exception("Execution failed")
        mock_action_registry.get_action.return_value = mock_action

        manager = PluginManager(action_registry=mock_action_registry)
        result = await manager.execute_action("TEST_ACTION")

        assert result["status"] == "error"
        assert "Execution failed" in result["message"]

    @pytest.mark.asyncio
    async def test_get_provider_context(self, mock_plugin):
        """Test collecting provider context."""
        good = MagicMock(spec=Provider)
        good.name = "good"
        good.get = AsyncMock(return_value="Wallet Address: abc")
        empty = MagicMock(spec=Provider)
        empty.name = "empty"
        empty.get = AsyncMock(return_value=None)
        broken = MagicMock(spec=Provider)
        broken.name = "broken"
        broken.get = AsyncMock(side_effect=Exception("boom"))
        mock_plugin.providers = [good, empty, broken]

        manager = PluginManager()
        manager._plugins[mock_plugin.name] = mock_plugin
        runtime = MagicMock()

        context = await manager.get_provider_context(runtime)

        assert context == ["Wallet Address: abc"]
        good.get.assert_awaited_once_with(runtime)

    def test_configure(self, mock_plugin, mock_action_registry, config):
        """Test configuring manager and plugins."""
        manager = PluginManager(action_registry=mock_action_registry)
        manager._plugins[mock_plugin.name] = mock_plugin

        manager.configure(config)

        assert manager.config == config
        mock_action_registry.configure_all_actions.assert_called_once_with(config)
        mock_plugin.configure.assert_called_once_with(config)

    def test_configure_plugin_error(self, mock_plugin, config):
        """Test handling plugin configuration errors."""
        mock_plugin.configure.side_effect = Exception("Config failed")

        manager = PluginManager()
        manager._plugins[mock_plugin.name] = mock_plugin

        # Should not raise exception
        manager.configure(config)

        assert manager.config == config
        mock_plugin.configure.assert_called_once_with(config)
