def as_user(user_id: int) -> dict:
	return {"X-User-Id": str(user_id)}
