from fastapi import APIRouter, Depends, HTTPException, Request, status

from resumekit.ai.types import AIServiceError
from resumekit.api.deps import get_ai_actions
from resumekit.core.config import settings
from resumekit.core.rate_limit import rate_limit
from resumekit.features import build_version_diff_summary, compute_job_match
from resumekit.schemas.tools import (
    AchievementsRequest,
    CoverLetterRequest,
    DiffRequest,
    DiffResponse,
    ImportProfileRequest,
    JobMatchRequest,
    JobMatchResult,
    LinesResponse,
    ResumeActionResult,
    ResumeRequest,
    StrengthScore,
    TailorRequest,
    TextRequest,
    TextResponse,
    TranslateRequest,
)
from resumekit.services.ai_actions import AIActions

router = APIRouter()


def _raise_ai_http_error(exc: AIServiceError) -> None:
    raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


@router.post("/resume/job-match", response_model=JobMatchResult)
@rate_limit()
async def resume_job_match(request: Request, payload: JobMatchRequest):
    _ = request
    return compute_job_match(payload.resume, payload.job_description)


@router.post("/resume/diff", response_model=DiffResponse)
@rate_limit()
async def resume_diff(request: Request, payload: DiffRequest):
    _ = request
    return DiffResponse(changes=build_version_diff_summary(payload.before, payload.after))


@router.post("/resume/strength", response_model=StrengthScore)
@rate_limit(settings.ai_rate_limit)
def resume_strength(request: Request, payload: ResumeRequest, actions: AIActions = Depends(get_ai_actions)):
    _ = request
    try:
        return actions.analyze_strength(payload.resume)
    except AIServiceError as exc:
        _raise_ai_http_error(exc)


@router.post("/resume/tailor", response_model=ResumeActionResult)
@rate_limit(settings.ai_rate_limit)
def resume_tailor(request: Request, payload: TailorRequest, actions: AIActions = Depends(get_ai_actions)):
    _ = request
    try:
        return actions.tailor_resume(payload.resume, payload.role)
    except AIServiceError as exc:
        _raise_ai_http_error(exc)


@router.post("/resume/import-profile", response_model=ResumeActionResult)
@rate_limit(settings.ai_rate_limit)
def resume_import_profile(
    request: Request,
    payload: ImportProfileRequest,
    actions: AIActions = Depends(get_ai_actions),
):
    _ = request
    try:
        return actions.import_profile(payload.resume, payload.profile_text)
    except AIServiceError as exc:
        _raise_ai_http_error(exc)


@router.post("/resume/translate", response_model=ResumeActionResult)
@rate_limit(settings.ai_rate_limit)
def resume_translate(request: Request, payload: TranslateRequest, actions: AIActions = Depends(get_ai_actions)):
    _ = request
    try:
        return actions.translate_resume(payload.resume, payload.language.strip())
    except AIServiceError as exc:
        _raise_ai_http_error(exc)


@router.post("/resume/suggest-skills", response_model=LinesResponse)
@rate_limit(settings.ai_rate_limit)
def resume_suggest_skills(request: Request, payload: ResumeRequest, actions: AIActions = Depends(get_ai_actions)):
    _ = request
    try:
        skills = actions.suggest_skills(payload.resume)
    except AIServiceError as exc:
        _raise_ai_http_error(exc)
    if skills is None:
        return LinesResponse(error="Skill suggestions are unavailable right now.")
    return LinesResponse(lines=skills)


@router.post("/resume/achievements", response_model=LinesResponse)
@rate_limit(settings.ai_rate_limit)
def resume_achievements(request: Request, payload: AchievementsRequest, actions: AIActions = Depends(get_ai_actions)):
    _ = request
    lines = [line.strip() for line in payload.lines if line.strip()]
    if not lines:
        return LinesResponse()
    try:
        boosted = actions.boost_achievements(lines)
    except AIServiceError as exc:
        _raise_ai_http_error(exc)
    if boosted is None:
        return LinesResponse(error="Achievement rewriting is unavailable right now.")
    return LinesResponse(lines=boosted)


@router.post("/resume/ats-suggestions", response_model=LinesResponse)
@rate_limit(settings.ai_rate_limit)
def resume_ats_suggestions(request: Request, payload: ResumeRequest, actions: AIActions = Depends(get_ai_actions)):
    _ = request
    try:
        suggestions = actions.ats_suggestions(payload.resume)
    except AIServiceError as exc:
        _raise_ai_http_error(exc)
    if suggestions is None:
        return LinesResponse(error="ATS suggestions are unavailable right now.")
    return LinesResponse(lines=suggestions)


@router.post("/resume/cover-letter", response_model=TextResponse)
@rate_limit(settings.ai_rate_limit)
def resume_cover_letter(request: Request, payload: CoverLetterRequest, actions: AIActions = Depends(get_ai_actions)):
    _ = request
    if not payload.job_description.strip():
        return TextResponse(error="Paste a job description first.")
    try:
        letter = actions.generate_cover_letter(payload.resume, payload.job_description)
    except AIServiceError as exc:
        _raise_ai_http_error(exc)
    if not letter:
        return TextResponse(error="Cover letter generation is unavailable right now.")
    return TextResponse(output=letter.strip())


@router.post("/resume/improve-summary", response_model=TextResponse)
@rate_limit(settings.ai_rate_limit)
def resume_improve_summary(request: Request, payload: TextRequest, actions: AIActions = Depends(get_ai_actions)):
    _ = request
    try:
        improved = actions.improve_summary(payload.text)
    except AIServiceError as exc:
        _raise_ai_http_error(exc)
    if not improved:
        return TextResponse(error="Summary improvement is unavailable right now.")
    return TextResponse(output=improved.strip())
