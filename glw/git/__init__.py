"""Git operations module.

Usage:
    from glw.git import Repository

    repo = Repository(Path("."))
    match repo.merge_base("HEAD", "origin/main"):
        case Ok(sha):
            print(sha)
        case Err(e):
            print(e.message)
"""

from glw.git.repository import GitError, GitQuery, Repository

__all__ = [
    "GitError",
    "GitQuery",
    "Repository",
]
