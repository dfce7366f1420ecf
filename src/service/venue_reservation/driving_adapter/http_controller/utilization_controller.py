from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.command.check_in_use_case import CheckInUseCase
from src.service.venue_reservation.app.command.force_check_out_use_case import (
    ForceCheckOutUseCase,
)
from src.service.venue_reservation.app.command.walk_in_check_in_use_case import (
    WalkInCheckInUseCase,
)
from src.service.venue_reservation.driving_adapter.http_controller.auth.current_user import (
    get_current_user_email,
)
from src.service.venue_reservation.driving_adapter.http_controller.schema.utilization_schema import (
    CheckInRequest,
    UtilizationResponse,
    WalkInRequest,
)


router = APIRouter()


@router.post('/check-in', status_code=status.HTTP_201_CREATED)
@Logger.io
async def check_in(
    request: CheckInRequest,
    use_case: CheckInUseCase = Depends(CheckInUseCase.depends),
) -> UtilizationResponse:
    occupancy = await use_case.execute(reservation_id=request.reservation_id)
    return UtilizationResponse.from_entity(occupancy)


@router.post('/walk-in', status_code=status.HTTP_201_CREATED)
@Logger.io
async def walk_in(
    request: WalkInRequest,
    user_email: str = Depends(get_current_user_email),
    use_case: WalkInCheckInUseCase = Depends(WalkInCheckInUseCase.depends),
) -> UtilizationResponse:
    occupancy = await use_case.execute(
        user_email=user_email,
        resource=request.resource_ref(),
        end_schedule=request.end_schedule,
    )
    return UtilizationResponse.from_entity(occupancy)


@router.patch('/{occupancy_id}/force-check-out', status_code=status.HTTP_200_OK)
@Logger.io
async def force_check_out(
    occupancy_id: int,
    use_case: ForceCheckOutUseCase = Depends(ForceCheckOutUseCase.depends),
) -> UtilizationResponse:
    occupancy = await use_case.execute(occupancy_id=occupancy_id)
    return UtilizationResponse.from_entity(occupancy)
