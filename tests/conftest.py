import pytest

SAMPLE_LAW_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Law Era="Heisei" Lang="ja" LawType="Act" Num="013" Year="28">
  <LawNum>平成二十八年法律第十三号</LawNum>
  <LawBody>
    <LawTitle>略称テスト法</LawTitle>
    <MainProvision>
      <Article Num="1">
        <ArticleCaption>（趣旨）</ArticleCaption>
        <ArticleTitle>第一条</ArticleTitle>
        <Paragraph Num="1">
          <ParagraphNum/>
          <ParagraphSentence>
            <Sentence Num="1">この法律は、地方税法等の一部を改正する等の法律（平成二十八年法律第十三号。以下この条において「改正法」という。）の施行に関し必要な事項を定める。</Sentence>
          </ParagraphSentence>
        </Paragraph>
      </Article>
      <Article Num="3_2">
        <ArticleTitle>第三条の二</ArticleTitle>
        <Paragraph Num="1">
          <ParagraphNum/>
          <ParagraphSentence>
            <Sentence Num="1">次に掲げる法律をいう。</Sentence>
          </ParagraphSentence>
          <Item Num="1">
            <ItemTitle>一</ItemTitle>
            <ItemSentence>
              <Sentence Num="1">所得税法（昭和四十年法律第三十三号。以下「所得税法」という。）</Sentence>
            </ItemSentence>
            <Subitem1 Num="1">
              <Subitem1Title>イ</Subitem1Title>
              <Subitem1Sentence>
                <Sentence Num="1">法人税法（昭和四十年法律第三十四号。以下イにおいて「法人税法」という。）</Sentence>
              </Subitem1Sentence>
            </Subitem1>
          </Item>
        </Paragraph>
        <Paragraph Num="2">
          <ParagraphNum>２</ParagraphNum>
          <ParagraphSentence>
            <Sentence Num="1">表のとおりとする。</Sentence>
          </ParagraphSentence>
          <TableStruct>
            <Table>
              <TableRow>
                <TableColumn>
                  <Sentence>消費税法（昭和六十三年法律第百八号。以下「消費税法」という。）</Sentence>
                </TableColumn>
              </TableRow>
            </Table>
          </TableStruct>
        </Paragraph>
      </Article>
    </MainProvision>
    <SupplProvision>
      <SupplProvisionLabel>附則</SupplProvisionLabel>
      <Article Num="1">
        <ArticleTitle>第一条</ArticleTitle>
        <Paragraph Num="1">
          <ParagraphNum/>
          <ParagraphSentence>
            <Sentence Num="1">旧法の規定はなおその効力を有する。以下同条において「旧法」という。</Sentence>
          </ParagraphSentence>
        </Paragraph>
      </Article>
    </SupplProvision>
    <SupplProvision AmendLawNum="令和二年法律第五号">
      <SupplProvisionLabel>附則</SupplProvisionLabel>
      <Paragraph Num="1">
        <ParagraphNum/>
        <ParagraphSentence>
          <Sentence Num="1">この法律は、公布の日から施行する。</Sentence><Sentence Num="2">ただし、地方自治法（昭和二十二年法律第六十七号。以下「自治法」という。）の規定は、なお従前の例による。</Sentence>
        </ParagraphSentence>
      </Paragraph>
    </SupplProvision>
  </LawBody>
</Law>
"""


@pytest.fixture
def law_xml():
    return SAMPLE_LAW_XML.encode("utf-8")
