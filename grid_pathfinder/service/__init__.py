from .path_planning_service import PathPlanningService, assemble_path

__all__ = ['PathPlanningService', 'assemble_path']
