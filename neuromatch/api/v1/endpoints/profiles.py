"""Neurotype profile endpoints"""
from fastapi import APIRouter
from typing import List

from neuromatch.models.response import NeurotypeProfileResponse
from neuromatch.services.profiles import list_profiles

router = APIRouter()


@router.get("", response_model=List[NeurotypeProfileResponse])
def get_profiles():
    """
    List the supported neurotypes with their scoring preferences.
    """
    return [NeurotypeProfileResponse.from_profile(p) for p in list_profiles()]
