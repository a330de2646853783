"""核心模块"""
from .enums import TrackingState, TimeSource
from .data_types import Vector3, Quaternion, Pose, ReferenceFrame, ControlResult
from .interfaces import ILifecycleComponent, ITrajectory, ICommandConverter
from .constants import (
    TWO_PI, STATE_DIM,
    IDX_X, IDX_Y, IDX_Z, IDX_ROLL, IDX_PITCH, IDX_YAW,
    POSITION_SLICE, ATTITUDE_SLICE,
    normalize_angle, angle_unwrap, unwrap_attitude,
)
from .transforms import euler_from_quaternion, yaw_rotation, pose_to_state_vector
from .clock import get_monotonic_time, get_wall_time, make_clock
from .exceptions import (
    ControllerError, ConfigurationError, ConfigValidationError,
    TrajectoryError, ControllerRuntimeError, HorizonExceededError,
)
