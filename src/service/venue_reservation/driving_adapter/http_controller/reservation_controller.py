from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import NaiveDatetime

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.command.cancel_reservation_use_case import (
    CancelReservationUseCase,
)
from src.service.venue_reservation.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.venue_reservation.app.command.update_reservation_status_use_case import (
    UpdateReservationStatusUseCase,
)
from src.service.venue_reservation.app.query.get_reservation_use_case import (
    GetReservationUseCase,
)
from src.service.venue_reservation.app.query.list_conflicts_use_case import (
    ListConflictsUseCase,
)
from src.service.venue_reservation.app.query.list_user_reservations_use_case import (
    ListUserReservationsUseCase,
)
from src.service.venue_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.venue_reservation.driving_adapter.http_controller.auth.current_user import (
    get_current_user_email,
)
from src.service.venue_reservation.driving_adapter.http_controller.schema.reservation_schema import (
    ConflictResponse,
    ReservationCreateRequest,
    ReservationResponse,
    ReservationSliceResponse,
    ReservationStatusUpdateRequest,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_reservation(
    request: ReservationCreateRequest,
    user_email: str = Depends(get_current_user_email),
    use_case: CreateReservationUseCase = Depends(CreateReservationUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.execute(
        user_email=user_email,
        resource=request.resource_ref(),
        start_schedule=request.start_schedule,
        end_schedule=request.end_schedule,
    )
    return ReservationResponse.from_entity(reservation)


# Registered before /{reservation_id} so 'my' is not parsed as an id
@router.get('/my')
@Logger.io
async def list_my_reservations(
    reservation_status: ReservationStatus = Query(ReservationStatus.PENDING, alias='status'),
    page: int = Query(0, ge=0),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    user_email: str = Depends(get_current_user_email),
    use_case: ListUserReservationsUseCase = Depends(ListUserReservationsUseCase.depends),
) -> ReservationSliceResponse:
    reservation_slice = await use_case.execute(
        user_email=user_email, status=reservation_status, page=page, size=size
    )
    return ReservationSliceResponse.from_slice(reservation_slice)


@router.get('/chair/{chair_id}/conflicts')
@Logger.io
async def list_chair_conflicts(
    chair_id: int,
    reference: Optional[NaiveDatetime] = None,
    use_case: ListConflictsUseCase = Depends(ListConflictsUseCase.depends),
) -> List[ConflictResponse]:
    conflicts = await use_case.for_chair(chair_id=chair_id, reference=reference)
    return [ConflictResponse.from_projection(conflict) for conflict in conflicts]


@router.get('/space/{space_id}/conflicts')
@Logger.io
async def list_space_conflicts(
    space_id: int,
    reference: Optional[NaiveDatetime] = None,
    use_case: ListConflictsUseCase = Depends(ListConflictsUseCase.depends),
) -> List[ConflictResponse]:
    conflicts = await use_case.for_space(space_id=space_id, reference=reference)
    return [ConflictResponse.from_projection(conflict) for conflict in conflicts]


@router.get('/{reservation_id}')
@Logger.io
async def get_reservation(
    reservation_id: int,
    use_case: GetReservationUseCase = Depends(GetReservationUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.execute(reservation_id=reservation_id)
    return ReservationResponse.from_entity(reservation)


@router.patch('/{reservation_id}/cancel', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_reservation(
    reservation_id: int,
    use_case: CancelReservationUseCase = Depends(CancelReservationUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.execute(reservation_id=reservation_id)
    return ReservationResponse.from_entity(reservation)


@router.patch('/{reservation_id}/status', status_code=status.HTTP_200_OK)
@Logger.io
async def update_reservation_status(
    reservation_id: int,
    request: ReservationStatusUpdateRequest,
    use_case: UpdateReservationStatusUseCase = Depends(UpdateReservationStatusUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.execute(reservation_id=reservation_id, status=request.status)
    return ReservationResponse.from_entity(reservation)
