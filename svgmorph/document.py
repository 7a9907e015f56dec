from xml.dom import minidom

SHAPE_TAGS = ['path', 'circle', 'ellipse']


def load(filename):
    return minidom.parse(filename)


def parse(svg_string):
    return minidom.parseString(svg_string)


def shapes_by_id(dom):
    """Map the id of every path, circle and ellipse element to the element."""
    shapes = {}
    for tag in SHAPE_TAGS:
        for element in dom.getElementsByTagName(tag):
            element_id = element.getAttribute('id')
            if element_id:
                shapes[element_id] = element
    return shapes


def hide(element):
    style = element.getAttribute('style')

    if 'display:none' not in style:
        if 'display:inline' in style:
            style = style.replace('display:inline', 'display:none')
        elif style:
            style = style.rstrip(';') + ';display:none'
        else:
            style = 'display:none'

    element.setAttribute('style', style)


def save(dom, filename):
    with open(filename, 'w', encoding='utf-8') as svg_file:
        dom.writexml(svg_file, encoding='utf-8')
