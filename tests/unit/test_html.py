import pytest

from berns import html as H


def test_element():
    assert H.element('a', {'href': '#nerds'}, lambda: 'Nerds!') == '<a href="#nerds">Nerds!</a>'
    assert H.element('a', {'href': '#nerds'}, 'Nerds!') == '<a href="#nerds">Nerds!</a>'


def test_element_empty():
    assert H.element('div', {}) == '<div></div>'
    assert H.element('div') == '<div></div>'
    assert H.element('div', None, lambda: None) == '<div></div>'


def test_element_suppressed_attributes():
    assert H.element('div', {'hidden': False}) == '<div></div>'


def test_element_content_not_escaped():
    inner = H.element('b', {}, 'bold & <i>italic</i>')
    assert H.element('p', {'class': 'x'}, inner) == '<p class="x"><b>bold & <i>italic</i></b></p>'


def test_element_content_called_once():
    calls = []

    def content():
        calls.append(True)
        return 'once'

    assert H.element('span', {'id': 'x'}, content) == '<span id="x">once</span>'
    assert len(calls) == 1


def test_element_content_coerced():
    assert H.element('td', {}, lambda: 42) == '<td>42</td>'


def test_element_unknown_tag():
    assert H.element('custom-widget', {'open': True}) == '<custom-widget open></custom-widget>'
    assert H.void('custom-void') == '<custom-void>'


def test_void():
    assert H.void('br') == '<br>'
    assert H.void('input', {'required': True}) == '<input required>'
    assert H.void('img', {'src': 'a.png', 'alt': '"A"'}) == '<img src="a.png" alt="&quot;A&quot;">'
    assert H.void('input', {'disabled': False}) == '<input>'


def test_void_ignores_content():
    calls = []

    def content():
        calls.append(True)
        return 'x'

    assert H.void('br', {}, 'x') == '<br>'
    assert H.br({}, 'x') == '<br>'
    assert H.img({'src': 'a.png'}, content) == '<img src="a.png">'
    assert not calls


def test_standard_wrappers():
    assert H.div() == '<div></div>'
    assert H.a({'href': '#nerds'}, lambda: 'Nerds!') == '<a href="#nerds">Nerds!</a>'
    assert H.div({'data': {'foo': 'bar', 'toggle': True}}, 'x') == '<div data-foo="bar" data-toggle>x</div>'
    assert getattr(H, 'del')({}, 'gone') == '<del>gone</del>'


def test_void_wrappers():
    assert H.br() == '<br>'
    assert H.input({'type': 'checkbox', 'checked': True}) == '<input type="checkbox" checked>'
    assert H.meta({'name': 'viewport', 'content': 'width=device-width'}) == (
        '<meta name="viewport" content="width=device-width">'
    )


@pytest.mark.parametrize('tag', H.STANDARD)
def test_every_standard_tag_has_wrapper(tag):
    wrapper = getattr(H, tag)
    assert wrapper.__name__ == tag
    assert wrapper({'id': 'x'}, 'y') == f'<{tag} id="x">y</{tag}>'


@pytest.mark.parametrize('tag', H.VOID)
def test_every_void_tag_has_wrapper(tag):
    wrapper = getattr(H, tag)
    assert wrapper.__name__ == tag
    assert wrapper({'id': 'x'}) == f'<{tag} id="x">'


def test_tag_tables_disjoint():
    assert not set(H.STANDARD) & set(H.VOID)
    assert len(H.STANDARD) == len(set(H.STANDARD))
    assert len(H.VOID) == len(set(H.VOID))


def test_sanitize():
    assert H.sanitize('This <span>should be clean</span>') == 'This should be clean'
    assert H.sanitize('5 > 3') == '5 > 3'
    assert H.sanitize('3 < 5') == '3 < 5'
    assert H.sanitize('&lt;span&gt;') == '&lt;span&gt;'
    assert H.sanitize('<>') == '<>'


def test_sanitize_passthrough():
    assert H.sanitize(None) is None
    assert H.sanitize(42) == 42


def test_sanitize_idempotent():
    text = 'x <a href="#">link</a> <<b>>y'
    once = H.sanitize(text)
    assert H.sanitize(once) == once
