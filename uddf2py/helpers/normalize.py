import logging

logger = logging.getLogger(__name__)


def ensure_list(value):
  if value is None:
    return []
  return value if isinstance(value, list) else [value]


def copy_tree(node):
  if isinstance(node, dict):
    return {key: copy_tree(value) for key, value in node.items()}
  if isinstance(node, list):
    return [copy_tree(item) for item in node]
  return node


def normalize(tree):
  """Copy the tree and make repetition groups and their dives always be lists."""
  cloned = copy_tree(tree)

  document = cloned.get('uddf') if isinstance(cloned, dict) else None
  profiledata = document.get('profiledata') if isinstance(document, dict) else None
  if not isinstance(profiledata, dict):
    return cloned

  groups = ensure_list(profiledata.get('repetitiongroup'))
  profiledata['repetitiongroup'] = groups

  dive_count = 0
  for group in groups:
    if not isinstance(group, dict):
      continue
    group['dive'] = ensure_list(group.get('dive'))
    dive_count += len(group['dive'])

  logger.debug("Normalized %d repetition group(s) with %d dive(s)", len(groups), dive_count)
  return cloned
