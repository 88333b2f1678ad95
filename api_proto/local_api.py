from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from hedgehog import solve
from hedgehog.config import DEFAULT_VARIANT
from hedgehog.errors import InvalidPuzzleError

app = FastAPI()

class SolveRequest(BaseModel):
    puzzle: list[list[list[int]]]  # chunk x row x col, blank = -1
    variant: str = DEFAULT_VARIANT
    verbose: bool = False
    max_steps: Optional[int] = None

@app.post("/api/solve")
def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives the puzzle (3D array) and returns the solved board or an unsolvable status.
    """
    try:
        return solve(
            request.puzzle,
            variant=request.variant,
            verbose=request.verbose,
            max_steps=request.max_steps,
        )
    except InvalidPuzzleError as e:
        # 入力エラーは探索前に弾く
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        import traceback
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(e))

@app.get("/api/health")
def health():
    return {"status": "ok"}
