from paraphraser.api.paraphrase import router as paraphrase_router

__all__ = ["paraphrase_router"]
