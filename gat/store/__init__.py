from gat.store.scenarios import ScenarioStore, backfill_workflow_path

__all__ = ["ScenarioStore", "backfill_workflow_path"]
