"""Smoke tests — fast checks that core components load without error.

They catch import errors and broken pipeline definitions before a full
``kedro run``.  They do NOT require the raw StormData file.
"""


# ── Test 1: All pipeline modules import cleanly ─────────────────
class TestPipelineImports:
    """Verify every pipeline module can be imported and exposes create_pipeline."""

    def test_import_data_processing(self):
        from storm_impact.pipelines.data_processing import create_pipeline

        pipeline = create_pipeline()
        assert len(pipeline.nodes) == 3

    def test_import_impact_ranking(self):
        from storm_impact.pipelines.impact_ranking import create_pipeline

        pipeline = create_pipeline()
        assert len(pipeline.nodes) == 3

    def test_import_reporting(self):
        from storm_impact.pipelines.reporting import create_pipeline

        pipeline = create_pipeline()
        assert len(pipeline.nodes) == 3


# ── Test 2: Registry wires the pipelines together ───────────────
class TestPipelineRegistry:
    """The default pipeline must run end to end: raw path → plots."""

    def test_registry_exposes_all_pipelines(self):
        from storm_impact.pipeline_registry import register_pipelines

        pipelines = register_pipelines()
        assert set(pipelines) == {
            "__default__",
            "data_processing",
            "impact_ranking",
            "reporting",
        }
        assert len(pipelines["__default__"].nodes) == 9

    def test_default_pipeline_inputs_are_only_parameters(self):
        from storm_impact.pipeline_registry import register_pipelines

        default = register_pipelines()["__default__"]
        assert all(name.startswith("params:") for name in default.inputs())

    def test_default_pipeline_outputs(self):
        from storm_impact.pipeline_registry import register_pipelines

        default = register_pipelines()["__default__"]
        assert default.outputs() == {
            "top_fatalities_plot",
            "top_injuries_plot",
            "top_economic_damage_plot",
        }
