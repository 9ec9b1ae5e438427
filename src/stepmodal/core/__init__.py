from stepmodal.core.gate import DeferredAnimationGate
from stepmodal.core.height import HeightReconciler
from stepmodal.core.models import (
    AnimationPhase,
    Direction,
    NavigationApi,
    ScreenDescriptor,
    SequencerState,
)
from stepmodal.core.registry import ScreenRegistry
from stepmodal.core.sequencer import StepSequencer

__all__ = [
    "AnimationPhase",
    "DeferredAnimationGate",
    "Direction",
    "HeightReconciler",
    "NavigationApi",
    "ScreenDescriptor",
    "ScreenRegistry",
    "SequencerState",
    "StepSequencer",
]
