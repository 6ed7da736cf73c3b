from core.ai.service_manager import WritingServiceManager, writing_service_manager


def get_service_manager() -> WritingServiceManager:
    return writing_service_manager
