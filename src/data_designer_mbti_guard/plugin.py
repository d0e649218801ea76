from data_designer.plugins.plugin import Plugin, PluginType

mbti_guard_plugin = Plugin(
    config_qualified_name="data_designer_mbti_guard.config.MbtiGuardColumnConfig",
    impl_qualified_name="data_designer_mbti_guard.generator.MbtiGuardColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
