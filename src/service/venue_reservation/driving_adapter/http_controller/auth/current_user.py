from fastapi import Header


async def get_current_user_email(
    x_user_email: str = Header(..., alias='X-User-Email', min_length=3),
) -> str:
    """Caller identity, resolved upstream by the gateway and forwarded as a header"""
    return x_user_email.strip().lower()
