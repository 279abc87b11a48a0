from .corpus import resume_corpus
from .diff import build_version_diff_summary
from .job_match import compute_job_match
from .keywords import top_keywords
from .strength import compute_heuristic_score
from .tokens import STOP_WORDS, clean_token, iter_tokens, split_tokens

__all__ = [
    "STOP_WORDS",
    "clean_token",
    "iter_tokens",
    "split_tokens",
    "resume_corpus",
    "top_keywords",
    "compute_job_match",
    "compute_heuristic_score",
    "build_version_diff_summary",
]
