from cascim.graphs.cascades import Cascade, CascadeStore
from cascim.graphs.io import is_comment_line, load_cascades_from_dir, read_cascade
