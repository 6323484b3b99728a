from .question_paper import router as question_paper_router
from .test_attempt import router as test_attempt_router

routes = [
    question_paper_router,
    test_attempt_router,
]
