from lxml import etree

# Element text that shares an element with attributes or children
TEXT_KEY = "_"


def make_parser():
  # No network fetches, no entity expansion. Unexpanded entity references
  # are not elements, so element_to_node drops them and their text.
  return etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    remove_comments=True,
    remove_pis=True,
  )


def local_name(tag):
  return etree.QName(tag).localname


def add_value(results, key, value):
  # A key seen twice becomes a list, in document order
  if key not in results:
    results[key] = value
  elif isinstance(results[key], list):
    results[key].append(value)
  else:
    results[key] = [results[key], value]


def element_to_node(element):
  children = [child for child in element if isinstance(child.tag, str)]
  text = collect_text(element)

  if not element.attrib and not children:
    return text if text.strip() else ''

  results = {}
  for name, value in element.attrib.items():
    add_value(results, local_name(name), value)
  for child in children:
    add_value(results, local_name(child.tag), element_to_node(child))
  if text.strip():
    results[TEXT_KEY] = text
  return results


def collect_text(element):
  parts = [element.text or '']
  for child in element:
    parts.append(child.tail or '')
  return ''.join(parts)


def xml_to_tree(data):
  if isinstance(data, str):
    data = data.encode('utf-8')
  root = etree.fromstring(data, make_parser())
  return {local_name(root.tag): element_to_node(root)}
