"""Medical case routes: start a gameplay session, and admin case creation."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.auth import verify_api_key
from app.dependencies import (
    get_case_repository,
    get_patient_generator,
    get_preset_repository,
    get_user_repository,
)
from app.exceptions import ConstraintError, LookupFailure
from app.repositories import CaseRepository, DuplicateRecordError, NpcPresetRepository, UserRepository
from app.repositories.cases import case_constraint, case_to_schema
from app.schemas.case import CaseSavedResponse, MedicalCaseData, StartSessionResponse
from app.services.patient_generator import PatientProfileGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/medical-case", tags=["medical-cases"])


@router.get("/start-session", response_model=StartSessionResponse)
async def start_session(
    roblox_id: str | None = Query(default=None, alias="robloxId"),
    cases: CaseRepository = Depends(get_case_repository),
    presets: NpcPresetRepository = Depends(get_preset_repository),
    users: UserRepository = Depends(get_user_repository),
    generator: PatientProfileGenerator = Depends(get_patient_generator),
    _api_key: str = Depends(verify_api_key),
) -> StartSessionResponse:
    """Pick a random case and generate a patient for it.

    Args:
        roblox_id: Optional player; when it names a registered user the
            generated patient is stored as their current session.

    Returns:
        The case definition and the generated patient profile.

    Raises:
        HTTPException: 404 if no cases exist, 422 if the chosen case has an
            invalid demographic constraint, 503 if the preset lookup fails.
    """
    case = await cases.random_case()
    if case is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No medical cases available",
        )

    try:
        patient = await generator.generate(case_constraint(case), presets.sample_by_gender)
    except ConstraintError as e:
        logger.error("Case %s has an invalid demographic constraint: %s", case.case_id, e)
        raise HTTPException(
            status_code=422,
            detail=f"Case {case.case_id} has an invalid demographic constraint: {e}",
        )
    except LookupFailure:
        logger.error("Visual preset lookup failed for case %s", case.case_id, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Patient appearance lookup is unavailable. Please try again.",
        )

    if roblox_id and not await users.save_patient_session(roblox_id, patient):
        logger.info("Roblox account %s has no profile; patient session not stored", roblox_id)

    return StartSessionResponse(case_data=case_to_schema(case), patient=patient)


@router.post("", response_model=CaseSavedResponse, status_code=status.HTTP_201_CREATED)
async def create_case(
    case_data: MedicalCaseData,
    cases: CaseRepository = Depends(get_case_repository),
    _api_key: str = Depends(verify_api_key),
) -> CaseSavedResponse:
    """Create a medical case.

    Authoring problems that do not block generation (e.g. a pregnant male
    patient) are returned as warnings rather than rejected.

    Raises:
        HTTPException: 409 if the case_id already exists.
    """
    try:
        await cases.create(case_data)
    except DuplicateRecordError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    warnings = case_data.demographics.warnings()
    for warning in warnings:
        logger.warning("Case %s saved with warning: %s", case_data.case_id, warning)

    return CaseSavedResponse(msg="Case Saved", warnings=warnings)
