"""
FastAPI wrapper for business day calendars.

Provides HTTP endpoints for holiday lookups and date adjustment.
"""

from datetime import date
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

# Import backend (installed as editable package)
from bizcal import __version__
from bizcal.core.adjustment import adjust_date
from bizcal.core.calendar import HolidayCalendar
from bizcal.core.conventions import BusinessDayConvention
from bizcal.core.exceptions import CalendarError
from bizcal.core.registry import available_calendars, get_calendar
from bizcal.schema import CalendarSpec, build_calendar


app = FastAPI(
    title="Business Day Calendar API",
    description="API for holiday calendars and business day adjustment",
    version=__version__,
)


# ==============================================================================
# Request/Response Models
# ==============================================================================

class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class CalendarInfo(BaseModel):
    """Calendar overview."""
    calendar_id: str
    weekend_days: List[str]
    holiday_count: int


class HolidaysResponse(BaseModel):
    """Holidays of a calendar within a year."""
    calendar_id: str
    year: int
    holidays: List[date]


class BusinessDayResponse(BaseModel):
    """Business day status of a date."""
    calendar_id: str
    date: date
    weekday: str
    is_business_day: bool


class AdjustRequest(BaseModel):
    """Request body for /adjust endpoint."""
    date: date
    convention: str = Field(default=BusinessDayConvention.MODIFIED_FOLLOWING.value)
    calendar_id: Optional[str] = Field(default=None)
    calendar: Optional[CalendarSpec] = Field(
        default=None,
        description="Inline calendar spec, used instead of calendar_id",
    )
    weekends_only: bool = Field(default=False)


class AdjustResponse(BaseModel):
    """Response from /adjust endpoint."""
    unadjusted_date: date
    adjusted_date: date
    convention: str
    calendar_id: str


# ==============================================================================
# Helpers
# ==============================================================================

def _calendar_or_404(calendar_id: str) -> HolidayCalendar:
    try:
        return get_calendar(calendar_id.upper())
    except CalendarError as e:
        raise HTTPException(status_code=404, detail=str(e))


# ==============================================================================
# Endpoints
# ==============================================================================

@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/calendars", response_model=List[CalendarInfo])
async def list_calendars():
    """List the available calendars."""
    infos = []
    for calendar_id in available_calendars():
        cal = get_calendar(calendar_id)
        infos.append(CalendarInfo(
            calendar_id=cal.calendar_id.value,
            weekend_days=[day.name for day in cal.weekend_days],
            holiday_count=len(cal.holidays),
        ))
    return infos


@app.get("/calendars/{calendar_id}/holidays", response_model=HolidaysResponse)
async def get_holidays(calendar_id: str, year: int = Query(..., ge=1, le=9999)):
    """Holidays of a calendar within one year."""
    cal = _calendar_or_404(calendar_id)
    return HolidaysResponse(
        calendar_id=cal.calendar_id.value,
        year=year,
        holidays=cal.holidays_between(date(year, 1, 1), date(year, 12, 31)),
    )


@app.get("/calendars/{calendar_id}/business-day", response_model=BusinessDayResponse)
async def check_business_day(calendar_id: str, date: date = Query(...)):
    """Check whether a date is a business day."""
    cal = _calendar_or_404(calendar_id)
    return BusinessDayResponse(
        calendar_id=cal.calendar_id.value,
        date=date,
        weekday=date.strftime("%A"),
        is_business_day=cal.is_business_day(date),
    )


@app.post("/adjust", response_model=AdjustResponse)
async def adjust(request: AdjustRequest):
    """
    Adjust a date to a business day.

    The calendar comes from the inline spec if given, else from calendar_id,
    else the weekend-only default.
    """
    if request.calendar is not None:
        cal = build_calendar(request.calendar)
    elif request.calendar_id is not None:
        cal = _calendar_or_404(request.calendar_id)
    else:
        cal = HolidayCalendar()

    if request.weekends_only:
        cal = cal.with_weekends_only()

    convention = BusinessDayConvention.parse(request.convention)
    try:
        adjusted = adjust_date(request.date, convention, cal)
    except CalendarError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return AdjustResponse(
        unadjusted_date=request.date,
        adjusted_date=adjusted,
        convention=convention.value,
        calendar_id=cal.calendar_id.value,
    )
