from fastapi import Request

from majin.core.dependencies import AppDependencies


def get_deps(request: Request) -> AppDependencies:
    return request.app.state.deps
