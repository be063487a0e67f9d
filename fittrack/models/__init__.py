from .user import User, Trainer
from .goal import FitnessGoal
from .workout_plan import WorkoutPlan
from .progress import ProgressEntry

__all__ = [
    'User',
    'Trainer',
    'FitnessGoal',
    'WorkoutPlan',
    'ProgressEntry'
]
