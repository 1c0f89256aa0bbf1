"""Identicon pipeline orchestration.

Composes the processor with its two collaborators:

    IdenticonProcessor -> Renderer -> FilePersister

and owns logging setup and the output location.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from identicon.constants import CANVAS_SIZE
from identicon.pipeline.processor import IdenticonProcessor
from identicon.rendering.renderer import Renderer, get_renderer
from identicon.rendering.persister import FilePersister
from identicon.schemas import InternalConfig, resolve_config
from identicon.setup_directories import setup_output_directory, get_image_path

__all__ = ['IdenticonPipeline', 'generate', 'setup_logging']

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def setup_logging(config: InternalConfig) -> None:
    """Configure the root logger from ``config.logging``.

    Installs a console handler and, when ``log_file`` is set, a file
    handler. Existing root handlers are replaced so repeated calls do
    not duplicate output.
    """
    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    # Clear existing handlers and add new ones
    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    # File handler
    if config.logging.log_file:
        log_path = Path(config.logging.log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    logger.info("Logging: level=%s, file=%s",
                logging.getLevelName(log_level), config.logging.log_file)


class IdenticonPipeline:
    """Generates identicon PNG files.

    For each input the pipeline computes the pixel map, renders it on a
    250x250 canvas and writes ``<input>.png`` to the output directory.
    There is no branching beyond this sequence: any failure aborts the
    remaining steps, and nothing is written unless rendering succeeded.
    Errors from the persister (OSError) reach the caller unchanged.

    Renderer and persister are collaborators; pass your own to draw or
    store images differently (tests pass mocks).

    Example usage::

        from identicon.pipeline import IdenticonPipeline

        pipeline = IdenticonPipeline(config)
        path = pipeline.run("banana")   # ./banana.png
    """

    def __init__(self, config: Optional[InternalConfig] = None,
                 renderer: Optional[Renderer] = None,
                 persister: Optional[FilePersister] = None,
                 processor: Optional[IdenticonProcessor] = None):
        """Initialize pipeline.

        Parameters
        ----------
        config : InternalConfig, optional
            Runtime configuration. Defaults to resolve_config() (expert
            defaults: MD5, Pillow, current directory).
        renderer : Renderer, optional
            Defaults to the backend selected in ``config.renderer``.
        persister : FilePersister, optional
            Defaults to a FilePersister honouring ``config.output.overwrite``.
        processor : IdenticonProcessor, optional
            Defaults to an IdenticonProcessor built from config.
        """
        self.config = config if config is not None else resolve_config()
        self.processor = processor or IdenticonProcessor(self.config)
        self.renderer = renderer or get_renderer(self.config)
        self.persister = persister or FilePersister(overwrite=self.config.output.overwrite)
        self._output_dir = None

    @property
    def output_dir(self) -> Path:
        """Output directory, created on first use."""
        if self._output_dir is None:
            self._output_dir = setup_output_directory(self.config.output.directory)
        return self._output_dir

    def render(self, value: Union[str, bytes]) -> bytes:
        """Compute and render the identicon for `value` without saving it."""
        image = self.processor.process(value)
        return self.renderer.render(CANVAS_SIZE, image.color, image.pixel_map)

    def run(self, value: Union[str, bytes]) -> Path:
        """Generate ``<value>.png`` and return its path."""
        data = self.render(value)
        path = get_image_path(self.output_dir, value)
        return self.persister.persist(path, data)

    def run_many(self, values: Iterable[Union[str, bytes]]) -> List[Path]:
        """Generate one image per input, in order.

        Inputs are independent; the first failure stops the batch and is
        raised to the caller.
        """
        paths = []
        for value in values:
            paths.append(self.run(value))
        logger.info("Generated %d identicon(s) in %s", len(paths), self.output_dir)
        return paths


def generate(value: Union[str, bytes],
             config: Optional[InternalConfig] = None,
             renderer: Optional[Renderer] = None,
             persister: Optional[FilePersister] = None) -> Path:
    """Generate the identicon for `value` and save it as ``<value>.png``.

    Parameters
    ----------
    value : str or bytes
        Input to hash. Strings are UTF-8 encoded.
    config : InternalConfig, optional
        Runtime configuration (defaults to expert defaults).
    renderer, persister : optional
        Collaborator overrides.

    Returns
    -------
    Path
        Path of the written PNG.

    Raises
    ------
    OSError
        If the file cannot be written.
    """
    pipeline = IdenticonPipeline(config, renderer=renderer, persister=persister)
    return pipeline.run(value)
