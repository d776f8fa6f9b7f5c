"""Layout calculation endpoint."""

from fastapi import APIRouter

from sheetcut.application.config import (
    JobConfiguration,
    config_to_required_panels,
    config_to_settings,
    config_to_stock_panels,
)
from sheetcut.infrastructure.formatters import result_to_dict
from sheetcut.web.dependencies import CalculateCommandDep
from sheetcut.web.schemas import ErrorResponseSchema, PackResponseSchema

router = APIRouter(prefix="/pack", tags=["pack"])


@router.post(
    "",
    response_model=PackResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
def pack_job(
    job: JobConfiguration,
    command: CalculateCommandDep,
) -> PackResponseSchema:
    """Calculate cutting layouts for a job.

    The request body is a job configuration, as used by job files.
    Pieces that fit nowhere are reported in ``remaining_panels``; they do
    not make the request fail.
    """
    settings = config_to_settings(job)
    result = command.execute(
        config_to_stock_panels(job),
        config_to_required_panels(job),
        settings,
    )
    return PackResponseSchema.model_validate(
        {
            "packer": settings.packer_type.value,
            "units": settings.units.value,
            "currency": settings.currency.value,
            **result_to_dict(result),
        }
    )
