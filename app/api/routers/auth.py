from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import (
    get_current_principal,
    get_issue_verification_code_use_case,
    get_login_use_case,
    get_logout_session_use_case,
)
from app.api.schemas.auth import (
    LoginRequest,
    LogoutResponse,
    TokenResponse,
    VerificationCodeResponse,
)
from app.application.dto.auth import LoginInput, LogoutInput
from app.application.use_cases.issue_verification_code import IssueVerificationCodeUseCase
from app.application.use_cases.login import LoginUseCase
from app.application.use_cases.logout_session import LogoutSessionUseCase
from app.domain.exceptions import (
    CaptchaInvalidError,
    LoginInfoInvalidError,
    LoginModeNotConfiguredError,
    UserStatusInvalidError,
    ValidationFailedError,
)


router = APIRouter()


@router.post("/tokens/captcha", response_model=VerificationCodeResponse)
def issue_verification_code(
    use_case: IssueVerificationCodeUseCase = Depends(get_issue_verification_code_use_case),
):
    output = use_case.execute()
    return VerificationCodeResponse(
        captcha_id=output.id,
        captcha_value=output.value,
        expires_at=output.expires_at,
    )


@router.post("/tokens", response_model=TokenResponse)
def login(
    req: LoginRequest,
    use_case: LoginUseCase = Depends(get_login_use_case),
):
    try:
        output = use_case.execute(
            LoginInput(
                mode=req.mode,
                identifier=req.identifier,
                password=req.password,
                captcha_id=req.captcha_id,
                captcha_value=req.captcha_value,
            )
        )
    except ValidationFailedError as exc:
        detail = [{"field": err.field, "message": err.message} for err in exc.field_errors]
        raise HTTPException(status_code=400, detail=detail) from exc
    except (CaptchaInvalidError, LoginInfoInvalidError) as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except UserStatusInvalidError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except LoginModeNotConfiguredError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return TokenResponse(
        token=output.token,
        principal=output.principal,
        issued_at=output.issued_at,
        roles=list(output.roles),
    )


@router.delete("/tokens", response_model=LogoutResponse)
def logout(
    principal: str = Depends(get_current_principal),
    use_case: LogoutSessionUseCase = Depends(get_logout_session_use_case),
):
    use_case.execute(LogoutInput(principal=principal))
    return LogoutResponse(ok=True)
