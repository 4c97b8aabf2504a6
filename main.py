# main.py
import yaml
import numpy as np
from collections import deque

from skeleton_engine.camera.recorded_source import RecordedBodyFrameSource
from skeleton_engine.common.logger import setup_logger
from skeleton_engine.processing.body_processor import BodyProcessor

def main():
    """
    The main application loop.
    Replays a body recording through the processor and logs each frame's metrics.
    """
    with open('config.yaml', 'r') as f:
        config = yaml.safe_load(f)

    try:
        logger = setup_logger(level=(config.get('logging') or {}).get('level', 'INFO'))
    except ValueError as e:
        logger = setup_logger()
        logger.warning(f"Invalid logging level, falling back to INFO. {e}")

    heights = deque(maxlen=100)

    try:
        source = RecordedBodyFrameSource(config['sensor'])
        processor = BodyProcessor(config.get('metrics', {}))
    except (IOError, yaml.YAMLError, ValueError) as e:
        logger.error(f"Failed to initialize. {e}")
        return

    try:
        for frame, metadata in source.frames():
            # --- Core Processing Pipeline ---
            result = processor.process_frame(frame, metadata)

            if result.metrics is None:
                logger.info(f"Frame {result.frame_id}: no body in front of the sensor")
                continue

            heights.append(result.metrics.height_m)
            logger.info(
                f"Frame {result.frame_id}: height={result.metrics.height_m:.3f} m "
                f"(avg {np.mean(heights):.3f} m), upper={result.metrics.upper_height_m:.3f} m, "
                f"leg={result.metrics.leg_side.value}, joints={result.metrics.tracked_joint_count}, "
                f"bodies={result.tracked_body_count}, {result.processing_time_ms:.2f} ms"
            )
    except KeyboardInterrupt:
        logger.info("Shutdown signal received.")
    except Exception as e:
        logger.exception(f"An unexpected critical error occurred: {e}")
    finally:
        logger.info("Application terminated.")

if __name__ == "__main__":
    main()
