"""Study planner endpoints — daily schedule and task suggestions."""

from fastapi import APIRouter, Depends

from api.deps import gateway_dependency, with_timeout
from models.request import (
    ScheduleRequest,
    ScheduleResponse,
    TaskSuggestionRequest,
    TaskSuggestionResponse,
)
from services.model_gateway import ModelGateway
from skills.study_skill import generate_schedule, suggest_tasks

router = APIRouter(prefix="/api/planner", tags=["planner"])


@router.post("/schedule", response_model=ScheduleResponse)
async def create_schedule(req: ScheduleRequest, gateway: ModelGateway = Depends(gateway_dependency)):
    schedule = await with_timeout(generate_schedule(req.subjects, req.preferences, gateway))
    return ScheduleResponse(schedule=schedule)


@router.post("/tasks", response_model=TaskSuggestionResponse)
async def create_task_suggestions(
    req: TaskSuggestionRequest, gateway: ModelGateway = Depends(gateway_dependency)
):
    tasks = await with_timeout(suggest_tasks(req.subject, req.level, gateway))
    return TaskSuggestionResponse(tasks=tasks)
