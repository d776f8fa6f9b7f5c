"""Placement engine discovery endpoint."""

from fastapi import APIRouter

from sheetcut.domain.value_objects import FitRule
from sheetcut.infrastructure.packing import PackerFactory
from sheetcut.web.schemas import PackersSchema

router = APIRouter(prefix="/packers", tags=["packers"])


@router.get("", response_model=PackersSchema)
async def list_packers() -> PackersSchema:
    """List registered placement engines and the available fit rules."""
    return PackersSchema(
        packers=PackerFactory.available_packers(),
        fit_rules=[rule.value for rule in FitRule],
    )
