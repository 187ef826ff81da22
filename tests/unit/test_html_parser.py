"""
HTML解析器单元测试
测试HTML片段到文档树的转换
"""

import pytest
from unittest.mock import patch

from slate_serializer.core.exceptions import ConfigurationError, NestingDepthError
from slate_serializer.core.html import ELEMENTS, HTMLParser, Hook, Label
from slate_serializer.core.html import html_parser as html_parser_module
from slate_serializer.schemas import ElementNode, HtmlOptions, dump_document

EMPTY_STATE = [{"type": "paragraph", "children": [{"text": ""}]}]


@pytest.mark.unit
class TestHTMLParser:
    """HTML解析器测试类"""

    def setup_method(self):
        """每个测试方法执行前的设置"""
        self.parser = HTMLParser()

    def parse(self, html, parser=None):
        return dump_document((parser or self.parser).parse_html_to_document(html))

    @pytest.mark.parametrize("html", ["", None])
    def test_empty_input_returns_empty_state(self, html):
        """测试空输入返回只含空段落的文档"""
        assert self.parse(html) == EMPTY_STATE

    def test_non_string_input_returns_empty_state(self):
        """测试非字符串输入降级为空文档并记录警告"""
        with patch.object(html_parser_module.logger, 'warning') as mock_warning:
            assert self.parse(123) == EMPTY_STATE
            mock_warning.assert_called_once()

    def test_paragraph_with_strong_mark(self):
        """测试段落中的加粗文本"""
        assert self.parse("<p>Hello <strong>world</strong></p>") == [
            {
                "type": "paragraph",
                "children": [
                    {"text": "Hello "},
                    {"text": "world", "strong": True},
                ],
            }
        ]

    def test_unordered_list(self):
        """测试无序列表"""
        assert self.parse("<ul><li>A</li><li>B</li></ul>") == [
            {
                "type": "unorderedList",
                "children": [
                    {"type": "listItem", "children": [{"text": "A"}]},
                    {"type": "listItem", "children": [{"text": "B"}]},
                ],
            }
        ]

    def test_whitespace_between_blocks_is_skipped(self):
        """测试块之间的空白文本不产生节点"""
        result = self.parse("<ul>\n  <li>A</li>\n</ul>")

        assert result == [
            {"type": "unorderedList", "children": [{"type": "listItem", "children": [{"text": "A"}]}]}
        ]

    def test_nested_marks_accumulate(self):
        """测试外层标记与自身标记叠加"""
        assert self.parse("<p><em><strong>a</strong>b</em></p>") == [
            {
                "type": "paragraph",
                "children": [
                    {"text": "a", "italic": True, "strong": True},
                    {"text": "b", "italic": True},
                ],
            }
        ]

    def test_unmarked_wrapper_passes_child_marks(self):
        """测试无标记的包裹元素只保留子元素自身的标记"""
        assert self.parse("<p><span><em>x</em> y</span></p>") == [
            {"type": "paragraph", "children": [{"text": "x", "italic": True}, {"text": " y"}]}
        ]

    def test_inline_link(self):
        """测试行内链接"""
        assert self.parse('<p>see <a href="/x">here</a></p>') == [
            {
                "type": "paragraph",
                "children": [
                    {"text": "see "},
                    {"type": "link", "children": [{"text": "here"}]},
                ],
            }
        ]

    def test_inline_children_are_text_runs(self):
        """测试行内元素的子节点只生成文本叶子"""
        assert self.parse("<p><a><strong>bold</strong> tail</a></p>") == [
            {
                "type": "paragraph",
                "children": [
                    {"type": "link", "children": [{"text": "bold", "strong": True}, {"text": " tail"}]},
                ],
            }
        ]

    def test_empty_inline_gets_empty_leaf(self):
        """测试空行内元素补充空文本叶子"""
        assert self.parse("<p><a></a></p>") == [
            {"type": "paragraph", "children": [{"type": "link", "children": [{"text": ""}]}]}
        ]

    def test_empty_block_gets_empty_leaf(self):
        """测试空块级元素补充空文本叶子"""
        assert self.parse("<p></p>") == EMPTY_STATE
        assert self.parse("<hr>") == [{"type": "hr", "children": [{"text": ""}]}]

    def test_image_has_no_children(self):
        """测试图片节点没有子节点"""
        assert self.parse('<img src="a.png">') == [{"type": "image", "children": []}]
        assert self.parse('<p><img src="a.png"></p>') == [
            {"type": "paragraph", "children": [{"type": "image", "children": []}]}
        ]

    @pytest.mark.parametrize("line_break", ["<br>", "<br/>", "<br />", "<BR>"])
    def test_line_breaks_become_newlines(self, line_break):
        """测试换行标签转换为换行符"""
        assert self.parse(f"<p>a{line_break}b</p>") == [
            {"type": "paragraph", "children": [{"text": "a\nb"}]}
        ]

    def test_unknown_tag_falls_back_to_paragraph(self):
        """测试未知标签回退为段落"""
        assert self.parse("<section><p>x</p></section>") == [
            {"type": "paragraph", "children": [{"type": "paragraph", "children": [{"text": "x"}]}]}
        ]

    def test_type_attribute_without_entry_falls_back_to_paragraph(self):
        """测试type属性拼接的键不存在时回退为段落"""
        assert self.parse('<ol type="a"><li>x</li></ol>') == [
            {"type": "paragraph", "children": [{"type": "listItem", "children": [{"text": "x"}]}]}
        ]

    def test_type_attribute_lookup_key(self):
        """测试使用标签名加type属性区分列表"""
        parser = HTMLParser({"elements": {"ola": "alphaList", "li": "listItem", "p": "paragraph"}})

        assert self.parse('<ol type="a"><li>x</li></ol>', parser) == [
            {"type": "alphaList", "children": [{"type": "listItem", "children": [{"text": "x"}]}]}
        ]

    def test_missing_paragraph_entry_defaults_to_paragraph(self):
        """测试自定义表中缺少段落项时仍回退为 paragraph"""
        parser = HTMLParser({"elements": {"li": "listItem"}})

        assert self.parse("<p>x</p>", parser) == [{"type": "paragraph", "children": [{"text": "x"}]}]

    def test_top_level_text_is_ignored(self):
        """测试顶层文本节点不生成文档节点"""
        assert self.parse("hello <p>x</p>") == [{"type": "paragraph", "children": [{"text": "x"}]}]
        assert self.parse("   ") == []

    def test_comments_are_skipped(self):
        """测试注释不生成文本叶子"""
        assert self.parse("<p>a<!-- note -->b</p>") == [
            {"type": "paragraph", "children": [{"text": "a"}, {"text": "b"}]}
        ]

    def test_non_breaking_space_is_content(self):
        """测试 &nbsp; 不被视为空白"""
        assert self.parse("<p>&nbsp;</p>") == [{"type": "paragraph", "children": [{"text": "\xa0"}]}]

    def test_table_structure(self):
        """测试表格结构保持嵌套"""
        result = self.parse("<table><tbody><tr><td>1</td><td>2</td></tr></tbody></table>")

        assert result == [
            {
                "type": "table",
                "children": [
                    {
                        "type": "tbody",
                        "children": [
                            {
                                "type": "tr",
                                "children": [
                                    {"type": "td", "children": [{"text": "1"}]},
                                    {"type": "td", "children": [{"text": "2"}]},
                                ],
                            }
                        ],
                    }
                ],
            }
        ]

    def test_article_document(self, article_html):
        """测试综合HTML片段"""
        assert self.parse(article_html) == [
            {
                "type": "paragraph",
                "children": [
                    {"text": "Intro with "},
                    {"text": "emphasis", "italic": True},
                    {"text": " and "},
                    {"type": "link", "children": [{"text": "a "}, {"text": "link", "strong": True}]},
                ],
            },
            {
                "type": "orderedList",
                "children": [
                    {"type": "listItem", "children": [{"text": "First"}]},
                    {"type": "listItem", "children": [{"text": "Second "}, {"text": "item", "underline": True}]},
                ],
            },
            {
                "type": "figure",
                "children": [
                    {"type": "image", "children": []},
                    {"type": "figcaption", "children": [{"text": "Chart"}]},
                ],
            },
            {
                "type": "table",
                "children": [
                    {
                        "type": "tbody",
                        "children": [
                            {
                                "type": "tr",
                                "children": [
                                    {"type": "td", "children": [{"text": "1"}]},
                                    {"type": "td", "children": [{"text": ""}]},
                                ],
                            }
                        ],
                    }
                ],
            },
            {"type": "hr", "children": [{"text": ""}]},
        ]

    def test_non_image_containers_are_never_empty(self, article_html, iter_document_nodes):
        """测试除图片外的容器节点都有子节点"""
        for node in iter_document_nodes(self.parse(article_html)):
            if "children" in node and node["type"] != "image":
                assert node["children"], node


@pytest.mark.unit
class TestHTMLParserOptions:
    """HTML解析器分类表覆盖测试"""

    def test_custom_mark_elements(self):
        """测试自定义格式标记表替换默认表"""
        parser = HTMLParser({"mark_elements": {"b": "bold"}})
        result = dump_document(parser.parse_html_to_document("<p><b>x</b><strong>y</strong></p>"))

        assert result == [{"type": "paragraph", "children": [{"text": "x", "bold": True}, {"text": "y"}]}]

    def test_custom_block_elements(self):
        """测试自定义块级标签集合"""
        html = "<div><section>x</section></div>"

        default_result = dump_document(HTMLParser().parse_html_to_document(html))
        custom_result = dump_document(
            HTMLParser(HtmlOptions(block_elements={"section"})).parse_html_to_document(html)
        )

        assert default_result == [{"type": "paragraph", "children": [{"text": "x"}]}]
        assert custom_result == [
            {"type": "paragraph", "children": [{"type": "paragraph", "children": [{"text": "x"}]}]}
        ]

    def test_custom_inline_elements(self):
        """测试自定义行内标签集合"""
        parser = HTMLParser({
            "elements": {**ELEMENTS, "span": "mention"},
            "inline_elements": ["a", "span"],
        })
        result = dump_document(parser.parse_html_to_document("<p>hi <span>@bob</span></p>"))

        assert result == [
            {"type": "paragraph", "children": [{"text": "hi "}, {"type": "mention", "children": [{"text": "@bob"}]}]}
        ]

    def test_hook_rule_post_processes_node(self):
        """测试钩子规则为链接附加地址"""
        def link_with_url(node, element):
            return ElementNode(type=node.type, children=node.children, url=element.get("href"))

        parser = HTMLParser({"elements": {**ELEMENTS, "a": Hook("link", link_with_url)}})
        result = dump_document(parser.parse_html_to_document('<p><a href="/x">x</a></p>'))

        assert result == [
            {
                "type": "paragraph",
                "children": [{"type": "link", "children": [{"text": "x"}], "url": "/x"}],
            }
        ]

    def test_hook_may_return_dict(self):
        """测试钩子返回字典时被验证为节点"""
        def with_source(node, element):
            return {"type": node.type, "children": [], "src": element.get("src")}

        parser = HTMLParser({"elements": {**ELEMENTS, "img": Hook("image", with_source)}})
        result = dump_document(parser.parse_html_to_document('<img src="a.png">'))

        assert result == [{"type": "image", "children": [], "src": "a.png"}]

    def test_hook_returning_invalid_node_raises(self):
        """测试钩子返回无效节点时抛出配置错误"""
        parser = HTMLParser({"elements": {"p": Hook("paragraph", lambda node, element: {"foo": 1})}})

        with pytest.raises(ConfigurationError):
            parser.parse_html_to_document("<p>x</p>")

    def test_label_rule(self):
        """测试显式 Label 规则"""
        parser = HTMLParser({"elements": {"p": Label("para")}})

        assert dump_document(parser.parse_html_to_document("<p>x</p>")) == [
            {"type": "para", "children": [{"text": "x"}]}
        ]

    @pytest.mark.parametrize("options", [
        {"elements": {"p": 42}},
        {"blocks": ["p"]},
        ["p"],
        {"mark_elements": {"b": "text"}},
    ])
    def test_invalid_options_raise(self, options):
        """测试无效选项抛出配置错误"""
        with pytest.raises(ConfigurationError) as exc_info:
            HTMLParser(options)

        assert exc_info.value.code == "CONFIG_ERROR"

    def test_options_are_not_mutated(self):
        """测试转换不会修改传入的分类表"""
        elements = {"p": "paragraph", "li": "listItem"}
        marks = {"b": "bold"}
        parser = HTMLParser({"elements": elements, "mark_elements": marks})
        parser.parse_html_to_document("<p><b>x</b></p><ul><li>y</li></ul>")

        assert elements == {"p": "paragraph", "li": "listItem"}
        assert marks == {"b": "bold"}

    def test_parsers_do_not_share_tables(self):
        """测试不同解析器的分类表互不影响"""
        custom = HTMLParser({"mark_elements": {"b": "bold"}})
        default = HTMLParser()
        html = "<p><b>x</b><strong>y</strong></p>"

        custom_result = dump_document(custom.parse_html_to_document(html))
        default_result = dump_document(default.parse_html_to_document(html))

        assert custom_result[0]["children"] == [{"text": "x", "bold": True}, {"text": "y"}]
        assert default_result[0]["children"] == [{"text": "x"}, {"text": "y", "strong": True}]


@pytest.mark.unit
class TestHTMLParserDepth:
    """嵌套深度限制测试"""

    def setup_method(self):
        self.parser = HTMLParser()
        self.parser.max_depth = 3

    def test_depth_within_limit(self):
        """测试未超过深度限制时正常解析"""
        result = dump_document(self.parser.parse_html_to_document("<ul><li><p>x</p></li></ul>"))

        assert result[0]["children"][0]["children"][0] == {"type": "paragraph", "children": [{"text": "x"}]}

    def test_depth_exceeded_raises(self):
        """测试超过深度限制时抛出异常"""
        with pytest.raises(NestingDepthError) as exc_info:
            self.parser.parse_html_to_document("<ul><li><ul><li>x</li></ul></li></ul>")

        assert exc_info.value.code == "NESTING_TOO_DEEP"
        assert exc_info.value.max_depth == 3
