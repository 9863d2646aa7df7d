"""Plugin registry for R-peak detectors."""

from importlib.metadata import entry_points

from .._logging import logger
from ..exceptions import ConfigError
from .base import PeakDetectionArgs, PeakDetectorProtocol
from .neurokit import NeuroKitDetector
from .threshold import AdaptiveThresholdDetector, GlobalThresholdDetector

ENTRY_POINT_GROUP = "ecg_hr_sim.peak_detectors"

BUILTIN_DETECTORS: dict[str, type[PeakDetectorProtocol]] = {
    GlobalThresholdDetector.name: GlobalThresholdDetector,
    AdaptiveThresholdDetector.name: AdaptiveThresholdDetector,
    NeuroKitDetector.name: NeuroKitDetector,
}


class PeakDetectorRegistry:
    """Registry of available peak detection strategies.

    The built-in detectors are always registered. Additional detectors are
    discovered through the ``ecg_hr_sim.peak_detectors`` entry point group.
    A plugin declares its entry point in its own pyproject.toml:

        [project.entry-points."ecg_hr_sim.peak_detectors"]
        pan_tompkins = "my_package.detectors:PanTompkinsDetector"

    Examples:
        # Get singleton instance
        registry = PeakDetectorRegistry.get_instance()

        # List available detectors
        names = registry.list_detectors()

        # Build a detector from settings
        detector = registry.create(PeakDetectionArgs(method="adaptive"))

        # Register a custom detector
        registry.register("custom", CustomDetector)
    """

    _instance: "PeakDetectorRegistry | None" = None
    _detectors: dict[str, type[PeakDetectorProtocol]]

    def __init__(self):
        """Initialize the registry with the built-ins and discover plugins."""
        self._detectors = dict(BUILTIN_DETECTORS)
        self._discover_plugins()

    @classmethod
    def get_instance(cls) -> "PeakDetectorRegistry":
        """Get the singleton registry instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _discover_plugins(self) -> None:
        """Discover and register detectors via entry points."""
        for ep in entry_points(group=ENTRY_POINT_GROUP):
            if ep.name in BUILTIN_DETECTORS:
                continue
            try:
                self._detectors[ep.name] = ep.load()
                logger.debug(f"Discovered peak detector plugin: {ep.name}")
            except Exception as e:
                logger.warning(f"Failed to load peak detector plugin '{ep.name}': {e}")

    def register(self, name: str, detector_class: type[PeakDetectorProtocol]) -> None:
        """Manually register a detector.

        Args:
            name: Unique name for the detector
            detector_class: Class implementing PeakDetectorProtocol

        Raises:
            ValueError: If name is already registered or the class doesn't implement the protocol
        """
        if name in self._detectors:
            raise ValueError(
                f"Peak detector '{name}' is already registered. "
                "Use a different name or unregister the existing one first."
            )
        if not hasattr(detector_class, "detect") or not hasattr(detector_class, "from_args"):
            raise ValueError(
                f"Detector class {detector_class} does not implement PeakDetectorProtocol. "
                "It must have 'from_args' and 'detect' methods."
            )
        self._detectors[name] = detector_class
        logger.info(f"Registered peak detector: {name}")

    def unregister(self, name: str) -> None:
        """Unregister a detector.

        Raises:
            KeyError: If the detector is not registered
        """
        if name not in self._detectors:
            raise KeyError(f"Peak detector '{name}' is not registered")
        del self._detectors[name]
        logger.info(f"Unregistered peak detector: {name}")

    def get(self, name: str) -> type[PeakDetectorProtocol]:
        """Get a detector class by name.

        Raises:
            ConfigError: If the detector is not registered
        """
        if name not in self._detectors:
            raise ConfigError(
                f"Peak detector '{name}' not found. Available detectors: {self.list_detectors()}"
            )
        return self._detectors[name]

    def create(self, args: PeakDetectionArgs) -> PeakDetectorProtocol:
        """Instantiate the detector selected by ``args.method``."""
        return self.get(args.method).from_args(args)

    def list_detectors(self) -> list[str]:
        """List all registered detector names."""
        return list(self._detectors.keys())

    def has_detector(self, name: str) -> bool:
        return name in self._detectors
