from app.services.rewrite_service import RewriteService
from app.config import config

def get_rewrite_service() -> RewriteService:
    return RewriteService(parser=config.HTML_PARSER)
