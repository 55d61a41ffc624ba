from .list_job_grades import JobGradeListResult, ListJobGradesUseCase

__all__ = ["JobGradeListResult", "ListJobGradesUseCase"]
