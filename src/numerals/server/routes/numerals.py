"""
Numeral routes: /api/numerals, /api/tables
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from numerals.core.decompose import Decomposer
from numerals.core.errors import InvalidInput, UnsupportedMagnitude
from numerals.core.format import capitalize, mark, parse_number
from numerals.server.deps import get_decomposer


router = APIRouter(prefix="/api", tags=["numerals"])


class NumeralResponse(BaseModel):
    input: str
    number: int
    words: str
    phrase: str
    marker: str


@router.get("/numerals/{text}", response_model=NumeralResponse)
async def translate_numeral(text: str, decomposer: Decomposer = Depends(get_decomposer)):
    """Translate a number into English words."""
    try:
        number = parse_number(text, decomposer.limit)
        words = decomposer.translate(number)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UnsupportedMagnitude as e:
        raise HTTPException(status_code=422, detail={"message": str(e), "limit": e.limit})

    return NumeralResponse(
        input=text,
        number=number,
        words=words,
        phrase=capitalize(words),
        marker=mark(text),
    )


@router.get("/tables")
async def get_tables(decomposer: Decomposer = Depends(get_decomposer)):
    """The lookup tables the server translates with."""
    return {
        "lexicon": decomposer.lexicon.to_dict(),
        "scales": decomposer.scales.to_dict(),
        "limit": decomposer.limit,
    }
